from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from fsnav.core.errors import wrap_error
from fsnav.core.path_navigation import parent_directory

PARENT_ENTRY_NAME = ".."


@dataclass(frozen=True)
class DirectoryEntry:
    display_name: str
    is_directory: bool
    full_path: Path


def _sort_key(entry: DirectoryEntry) -> tuple[int, str]:
    return (0 if entry.is_directory else 1, entry.display_name)


def sort_entries(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Directories first, then case-sensitive code-point order on name."""
    return sorted(entries, key=_sort_key)


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def list_directory(directory: Path, *, show_hidden: bool = True) -> list[DirectoryEntry]:
    try:
        with os.scandir(directory) as scan:
            children = [
                DirectoryEntry(
                    display_name=entry.name,
                    is_directory=_is_dir(entry),
                    full_path=directory / entry.name,
                )
                for entry in scan
                if show_hidden or not entry.name.startswith(".")
            ]
    except OSError as exc:
        raise wrap_error(
            exc,
            code="listing_failed",
            message=f"Unable to read directory {directory}",
        ) from exc

    rows = sort_entries(children)
    parent = parent_directory(directory)
    if parent is not None:
        rows.insert(0, DirectoryEntry(PARENT_ENTRY_NAME, True, parent))
    return rows
