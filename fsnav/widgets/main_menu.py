from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Sequence

from rich.text import Text

from fsnav.core.path_navigation import breadcrumb_segments
from fsnav.core.state import Clipboard, ClipboardMode, SessionState
from fsnav.services.file_listing import DirectoryEntry
from fsnav.widgets.screen import TerminalScreen

FOLDER_MARKER = "📁"
FILE_MARKER = "📄"
MAIN_PROMPT = "\nChoose an item or command: "

PASTE_KEY = "p"
CLEAR_CLIPBOARD_KEY = "c"
NEW_FOLDER_KEY = "n"
NEW_FILE_KEY = "f"
QUIT_KEY = "q"


@dataclass(frozen=True)
class MenuBinding:
    key: str
    description: str


CLIPBOARD_BINDINGS = (
    MenuBinding(PASTE_KEY, "Paste from clipboard"),
    MenuBinding(CLEAR_CLIPBOARD_KEY, "Clear clipboard"),
)

PATH_BINDINGS = (
    MenuBinding(NEW_FOLDER_KEY, "New folder"),
    MenuBinding(NEW_FILE_KEY, "New file"),
    MenuBinding(QUIT_KEY, "Quit"),
)

_CLIPBOARD_VERBS = {
    ClipboardMode.COPY: "Copying",
    ClipboardMode.CUT: "Cutting",
}


def breadcrumbs(path: PurePath) -> str:
    return "Current path: " + "/".join(breadcrumb_segments(path))


def clipboard_status(clipboard: Clipboard) -> str | None:
    verb = _CLIPBOARD_VERBS.get(clipboard.mode)
    if verb is None:
        return None
    return f"Clipboard: {verb} '{clipboard.name}'"


def entry_line(index: int, entry: DirectoryEntry) -> Text:
    marker = FOLDER_MARKER if entry.is_directory else FILE_MARKER
    name_style = "bold blue" if entry.is_directory else ""
    return Text.assemble(
        (f"[{index}]", "bold"),
        f" {marker} ",
        (entry.display_name, name_style),
    )


def binding_line(binding: MenuBinding) -> Text:
    return Text.assemble((f"[{binding.key}]", "bold"), f" {binding.description}")


def command_bindings(clipboard: Clipboard) -> tuple[MenuBinding, ...]:
    if clipboard.is_empty:
        return PATH_BINDINGS
    return CLIPBOARD_BINDINGS + PATH_BINDINGS


def render_main_menu(
    screen: TerminalScreen,
    state: SessionState,
    entries: Sequence[DirectoryEntry],
) -> None:
    screen.clear()
    screen.print(breadcrumbs(state.current_dir))
    screen.print()

    status = clipboard_status(state.clipboard)
    if status is not None:
        screen.print(Text(status, style="cyan"))
        screen.print()

    for index, entry in enumerate(entries):
        screen.print(entry_line(index, entry))

    screen.print()
    screen.print(Text("Commands:", style="bold"))
    for binding in command_bindings(state.clipboard):
        screen.print(binding_line(binding))
