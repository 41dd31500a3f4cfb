from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from fsnav.core.clipboard import ClipboardController
from fsnav.core.config import RuntimeConfig, get_runtime_config
from fsnav.core.errors import FsnavError, format_error
from fsnav.core.fs_controller import FileSystemController
from fsnav.core.logging import get_logger, log_event
from fsnav.core.path_actions import PathActionController
from fsnav.core.path_navigation import (
    is_navigable_directory,
    nearest_navigable_ancestor,
    resolve_entry,
    select_entry,
)
from fsnav.core.state import ClipboardMode, SessionState, SessionStore
from fsnav.services.file_listing import DirectoryEntry, list_directory
from fsnav.services.launcher import DefaultAppLauncher, select_launcher
from fsnav.widgets.dialogs import InputDialog
from fsnav.widgets.file_menu import FileMenu
from fsnav.widgets.main_menu import (
    CLEAR_CLIPBOARD_KEY,
    MAIN_PROMPT,
    NEW_FILE_KEY,
    NEW_FOLDER_KEY,
    PASTE_KEY,
    QUIT_KEY,
    render_main_menu,
)
from fsnav.widgets.screen import TerminalScreen

logger = get_logger("fsnav.app")

EXIT_OK = 0
EXIT_INTERRUPTED = 130


class Fsnav:
    """The interactive loop: list, render, read one command, dispatch, repeat."""

    def __init__(
        self,
        start_path: Path,
        *,
        screen: TerminalScreen | None = None,
        config: RuntimeConfig | None = None,
        fs_controller: FileSystemController | None = None,
        launcher: DefaultAppLauncher | None = None,
    ) -> None:
        self.config = config or get_runtime_config()
        self.screen = screen or TerminalScreen()
        self.store = SessionStore(SessionState(current_dir=start_path))
        self.fs_controller = fs_controller or FileSystemController()
        self.launcher = launcher or select_launcher(open_command=self.config.open_command)
        self.clipboard = ClipboardController(self.store, self.fs_controller)
        self.path_actions = PathActionController(
            present_input=self._present_input_dialog,
            notify=self.screen.message,
            fs_controller=self.fs_controller,
            launcher=self.launcher,
        )
        self.file_menu = FileMenu(self.screen, self.clipboard, self.path_actions)
        self._commands: dict[str, Callable[[], None]] = {
            PASTE_KEY: self._paste,
            CLEAR_CLIPBOARD_KEY: self._clear_clipboard,
            NEW_FOLDER_KEY: lambda: self._create_path(is_directory=True),
            NEW_FILE_KEY: lambda: self._create_path(is_directory=False),
        }
        self._last_listed_dir: Path | None = None
        self._observed_state: SessionState | None = None
        self.store.subscribe(self._on_state_changed)

    @property
    def current_dir(self) -> Path:
        return self.store.current_dir

    def run(self) -> int:
        log_event(logger, "session_started", path=self.current_dir)
        while True:
            try:
                exit_code = self.step()
            except EOFError:
                return EXIT_OK
            except KeyboardInterrupt:
                return EXIT_INTERRUPTED
            if exit_code is not None:
                log_event(logger, "session_ended", exit_code=exit_code)
                return exit_code

    def step(self) -> int | None:
        """Run one render/read/dispatch cycle; return an exit code to stop."""
        try:
            entries = self._list_current_directory()
        except FsnavError as exc:
            self._report(exc, event="listing_failed")
            self._recover_listing()
            return None

        render_main_menu(self.screen, self.store.state, entries)
        command = self.screen.prompt(MAIN_PROMPT)
        try:
            return self.dispatch(command, entries)
        except EOFError:
            raise
        except Exception as exc:
            self._report(exc)
            return None

    def dispatch(self, command: str, entries: Sequence[DirectoryEntry]) -> int | None:
        if command == QUIT_KEY:
            return EXIT_OK

        handler = self._commands.get(command)
        if handler is not None:
            handler()
            self.screen.pause()
            return None

        entry = resolve_entry(entries, command)
        file_path = select_entry(self.store, entry)
        if file_path is not None:
            self.file_menu.show(file_path)
        return None

    def _list_current_directory(self) -> list[DirectoryEntry]:
        directory = self.current_dir
        entries = list_directory(directory, show_hidden=self.config.show_hidden)
        self._last_listed_dir = directory
        return entries

    def _recover_listing(self) -> None:
        current = self.current_dir
        fallback = self._last_listed_dir
        if fallback is None or fallback == current or not is_navigable_directory(fallback):
            fallback = nearest_navigable_ancestor(current)
        if fallback is not None:
            self.store.set_current_dir(fallback)

    def _paste(self) -> None:
        result = self.clipboard.paste(self.current_dir)
        verb = "copied" if result.mode is ClipboardMode.COPY else "moved"
        self.screen.message(f"File {verb}: {result.destination}")

    def _clear_clipboard(self) -> None:
        self.clipboard.clear()
        self.screen.message("Clipboard cleared")

    def _create_path(self, *, is_directory: bool) -> None:
        self.path_actions.create_path(self.current_dir, is_directory=is_directory)

    def _present_input_dialog(self, dialog: InputDialog) -> str:
        return dialog.present(self.screen)

    def _report(self, error: BaseException, *, event: str = "action_failed") -> None:
        text, severity = format_error(error)
        if isinstance(error, FsnavError):
            log_event(logger, event, code=error.code, message=text)
        else:
            logger.exception("Unexpected error while handling a command")
        if severity == "error":
            self.screen.error(text)
        else:
            self.screen.message(text, severity=severity)
        self.screen.pause()

    def _on_state_changed(self, state: SessionState) -> None:
        previous = self._observed_state
        self._observed_state = state
        if previous is None:
            return
        if state.current_dir != previous.current_dir:
            log_event(logger, "navigate", path=state.current_dir)
        if state.clipboard != previous.clipboard:
            log_event(
                logger,
                "clipboard_changed",
                mode=state.clipboard.mode.value,
                path=state.clipboard.path,
            )


def main(start_path: Path, *, config: RuntimeConfig | None = None) -> int:
    return Fsnav(start_path, config=config).run()
