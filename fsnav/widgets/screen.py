from __future__ import annotations

from typing import TextIO

from rich.console import Console, RenderableType
from rich.text import Text

from fsnav.core.errors import Severity

PAUSE_PROMPT = "Press Enter to continue..."
CLEAR_SEQUENCE = "\x1b[2J\x1b[H"

SEVERITY_STYLES: dict[Severity, str] = {
    "information": "",
    "warning": "yellow",
    "error": "bold red",
}


class TerminalScreen:
    """Line-oriented view over a rich console: print, prompt, pause."""

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
        *,
        stream: TextIO | None = None,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)
        self._stream = stream

    def clear(self) -> None:
        if self.console.is_terminal:
            self.console.clear()
            return
        # rich drops control segments when the output is not a terminal.
        self.console.file.write(CLEAR_SEQUENCE)

    def print(self, renderable: RenderableType = "") -> None:
        self.console.print(renderable, markup=False, emoji=False, highlight=False)

    def message(self, text: str, severity: Severity = "information") -> None:
        self.print(Text(text, style=SEVERITY_STYLES.get(severity, "")))

    def error(self, text: str) -> None:
        self.error_console.print(
            Text(f"Error: {text}", style=SEVERITY_STYLES["error"]),
            markup=False,
            emoji=False,
            highlight=False,
        )

    def prompt(self, label: str) -> str:
        line = self.console.input(label, markup=False, emoji=False, stream=self._stream)
        # ``Console.input`` only raises on EOF when reading stdin itself.
        if self._stream is not None and not line:
            raise EOFError
        return line.strip()

    def pause(self) -> None:
        self.print()
        self.prompt(PAUSE_PROMPT)
