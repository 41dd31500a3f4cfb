from __future__ import annotations

from pathlib import Path
from typing import Callable

from rich.text import Text

from fsnav.core.clipboard import ClipboardController
from fsnav.core.path_actions import PathActionController
from fsnav.widgets.main_menu import MenuBinding, binding_line
from fsnav.widgets.screen import TerminalScreen

FILE_MENU_PROMPT = "\nChoose an action (b - back): "
BACK_KEY = "b"

FILE_MENU_BINDINGS = (
    MenuBinding("1", "Copy"),
    MenuBinding("2", "Cut"),
    MenuBinding("3", "Delete"),
    MenuBinding("4", "Rename"),
    MenuBinding("5", "Open"),
)


class FileMenu:
    """Per-file actions. Copy, cut, delete and rename leave the menu; open stays."""

    def __init__(
        self,
        screen: TerminalScreen,
        clipboard: ClipboardController,
        path_actions: PathActionController,
    ) -> None:
        self._screen = screen
        self._clipboard = clipboard
        self._path_actions = path_actions
        # Each handler returns True when the menu should stay open.
        self._handlers: dict[str, Callable[[Path], bool]] = {
            "1": self._copy,
            "2": self._cut,
            "3": self._delete,
            "4": self._rename,
            "5": self._open,
        }

    def show(self, file_path: Path) -> None:
        while True:
            self._render(file_path)
            choice = self._screen.prompt(FILE_MENU_PROMPT)
            if choice == BACK_KEY:
                return
            handler = self._handlers.get(choice)
            if handler is None:
                self._screen.message("Invalid input!", severity="warning")
                self._screen.pause()
                continue
            stay = handler(file_path)
            self._screen.pause()
            if not stay:
                return

    def _render(self, file_path: Path) -> None:
        self._screen.clear()
        self._screen.print(Text.assemble(("File: ", "bold"), file_path.name))
        for binding in FILE_MENU_BINDINGS:
            self._screen.print(binding_line(binding))

    def _copy(self, file_path: Path) -> bool:
        self._clipboard.stage_copy(file_path)
        self._screen.message("File copied to clipboard")
        return False

    def _cut(self, file_path: Path) -> bool:
        self._clipboard.stage_cut(file_path)
        self._screen.message("File cut to clipboard")
        return False

    def _delete(self, file_path: Path) -> bool:
        self._path_actions.delete_path(file_path)
        return False

    def _rename(self, file_path: Path) -> bool:
        self._path_actions.rename_path(file_path)
        return False

    def _open(self, file_path: Path) -> bool:
        self._path_actions.open_path(file_path)
        return True
