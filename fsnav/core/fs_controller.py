from __future__ import annotations

import errno
import os
import shutil
from pathlib import Path

from fsnav.core.errors import ValidationError, wrap_error


class FileSystemController:
    """Encapsulates file-system mutations so the menus stay lean."""

    def create_directory(self, parent: Path, name: str) -> Path:
        target = self._new_target(parent, name, noun="Folder")
        try:
            target.mkdir()
        except OSError as exc:
            raise wrap_error(
                exc, code="create_failed", message=f"Could not create folder '{name}'"
            ) from exc
        return target

    def create_file(self, parent: Path, name: str) -> Path:
        target = self._new_target(parent, name, noun="File")
        try:
            with open(target, "x", encoding="utf-8"):
                pass
        except OSError as exc:
            raise wrap_error(
                exc, code="create_failed", message=f"Could not create file '{name}'"
            ) from exc
        return target

    def delete_file(self, target: Path) -> None:
        try:
            target.unlink()
        except OSError as exc:
            raise wrap_error(
                exc, code="delete_failed", message=f"Could not delete '{target.name}'"
            ) from exc

    def rename_file(self, source: Path, new_name: str) -> Path:
        if not new_name:
            raise ValidationError(code="empty_name", message="The new name cannot be empty!")
        try:
            destination = source.with_name(new_name)
        except ValueError as exc:
            raise ValidationError(
                code="invalid_name",
                message=f"'{new_name}' is not a valid file name",
            ) from exc
        try:
            os.rename(source, destination)
        except OSError as exc:
            raise wrap_error(
                exc,
                code="rename_failed",
                message=f"Could not rename '{source.name}' to '{new_name}'",
            ) from exc
        return destination

    def copy_file(self, source: Path, destination: Path) -> Path:
        try:
            shutil.copy2(source, destination)
        except OSError as exc:
            raise wrap_error(
                exc, code="copy_failed", message=f"Could not copy '{source.name}'"
            ) from exc
        return destination

    def move_file(self, source: Path, destination: Path) -> Path:
        try:
            os.rename(source, destination)
        except OSError as exc:
            if exc.errno != errno.EXDEV:
                raise wrap_error(
                    exc, code="move_failed", message=f"Could not move '{source.name}'"
                ) from exc
            self._move_across_devices(source, destination)
        return destination

    def _move_across_devices(self, source: Path, destination: Path) -> None:
        try:
            shutil.copy2(source, destination)
            source.unlink()
        except OSError as exc:
            raise wrap_error(
                exc, code="move_failed", message=f"Could not move '{source.name}'"
            ) from exc

    def _new_target(self, parent: Path, name: str, *, noun: str) -> Path:
        if not name:
            raise ValidationError(
                code="empty_name", message=f"{noun} name cannot be empty!"
            )
        target = parent / name
        if os.path.lexists(target):
            raise ValidationError(
                code="name_collision", message=f"{noun} '{name}' already exists!"
            )
        return target
