from __future__ import annotations

from dataclasses import dataclass

from fsnav.widgets.screen import TerminalScreen


@dataclass(frozen=True)
class InputDialog:
    message: str
    title: str | None = None

    def present(self, screen: TerminalScreen) -> str:
        if self.title:
            screen.clear()
            screen.print(self.title)
        return screen.prompt(self.message)
