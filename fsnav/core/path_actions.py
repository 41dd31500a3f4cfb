from __future__ import annotations

from pathlib import Path
from typing import Callable

from fsnav.core.fs_controller import FileSystemController
from fsnav.core.logging import get_logger, log_event
from fsnav.services.launcher import DefaultAppLauncher
from fsnav.widgets.dialogs import InputDialog

logger = get_logger("fsnav.path_actions")


class PathActionController:
    """Orchestrates name prompts around file/directory creation, rename, delete and open."""

    def __init__(
        self,
        *,
        present_input: Callable[[InputDialog], str],
        notify: Callable[[str], None],
        fs_controller: FileSystemController,
        launcher: DefaultAppLauncher,
    ) -> None:
        self._present_input = present_input
        self._notify = notify
        self._fs = fs_controller
        self._launcher = launcher

    def create_path(self, parent: Path, *, is_directory: bool) -> Path:
        noun = "folder" if is_directory else "file"
        name = self._present_input(
            InputDialog(
                f"Enter {noun} name: ",
                title=f"Creating a new {noun} in: {parent}",
            )
        )
        if is_directory:
            target = self._fs.create_directory(parent, name)
        else:
            target = self._fs.create_file(parent, name)
        log_event(logger, "create_path", path=target, is_directory=is_directory)
        self._notify(f"{noun.capitalize()} created: {target}")
        return target

    def delete_path(self, target: Path) -> None:
        self._fs.delete_file(target)
        log_event(logger, "delete_path", path=target)
        self._notify("File deleted")

    def rename_path(self, target: Path) -> Path:
        new_name = self._present_input(InputDialog("Enter the new file name: "))
        destination = self._fs.rename_file(target, new_name)
        log_event(logger, "rename_path", source=target, destination=destination)
        self._notify("File renamed")
        return destination

    def open_path(self, target: Path) -> None:
        self._launcher.launch(target)
        log_event(logger, "open_path", path=target)
        self._notify(f"Opening {target.name}")
