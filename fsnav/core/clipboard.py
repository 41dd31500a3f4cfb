from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from fsnav.core.errors import ValidationError
from fsnav.core.fs_controller import FileSystemController
from fsnav.core.logging import get_logger, log_event
from fsnav.core.state import Clipboard, ClipboardMode, SessionStore

logger = get_logger("fsnav.clipboard")


@dataclass(frozen=True)
class PasteResult:
    mode: ClipboardMode
    source: Path
    destination: Path


class ClipboardController:
    """Stages copy/cut requests and performs them on paste."""

    def __init__(self, store: SessionStore, fs_controller: FileSystemController) -> None:
        self._store = store
        self._fs = fs_controller

    def stage_copy(self, path: Path) -> None:
        self._reject_directory(path)
        self._store.set_clipboard(Clipboard.copy(path))

    def stage_cut(self, path: Path) -> None:
        self._reject_directory(path)
        self._store.set_clipboard(Clipboard.cut(path))

    def clear(self) -> None:
        if self._store.clipboard.is_empty:
            raise ValidationError(
                code="clipboard_already_empty", message="Clipboard is already empty!"
            )
        self._store.set_clipboard(Clipboard.empty())

    def paste(self, target_dir: Path) -> PasteResult:
        clipboard = self._store.clipboard
        if clipboard.is_empty or clipboard.path is None:
            raise ValidationError(code="clipboard_empty", message="Clipboard is empty!")

        source = clipboard.path
        destination = target_dir / source.name
        if os.path.lexists(destination):
            raise ValidationError(
                code="name_collision",
                message="A file with that name already exists!",
                detail=str(destination),
            )

        if clipboard.mode is ClipboardMode.COPY:
            self._fs.copy_file(source, destination)
        else:
            self._fs.move_file(source, destination)
            self._store.set_clipboard(Clipboard.empty())

        log_event(
            logger,
            "paste",
            mode=clipboard.mode.value,
            source=source,
            destination=destination,
        )
        return PasteResult(clipboard.mode, source, destination)

    def _reject_directory(self, path: Path) -> None:
        if path.is_dir():
            raise ValidationError(
                code="stage_directory",
                message="Only files can be placed on the clipboard.",
                detail=str(path),
            )
