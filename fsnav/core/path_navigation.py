from __future__ import annotations

from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Sequence, TypeVar

from fsnav.core.errors import InputError

if TYPE_CHECKING:
    from fsnav.core.state import SessionStore
    from fsnav.services.file_listing import DirectoryEntry

_PathT = TypeVar("_PathT", bound=PurePath)


def parent_directory(path: _PathT) -> _PathT | None:
    parent = path.parent
    if parent == path:
        return None
    return parent


def is_navigable_directory(path: Path) -> bool:
    return path.exists() and path.is_dir()


def nearest_navigable_ancestor(path: Path) -> Path | None:
    candidate = parent_directory(path)
    while candidate is not None:
        if is_navigable_directory(candidate):
            return candidate
        candidate = parent_directory(candidate)
    return None


def breadcrumb_segments(path: PurePath) -> list[str]:
    """Named segments of ``path`` from root to leaf; the anchor is not a segment."""
    return [part for part in path.parts if part != path.anchor]


def resolve_entry(entries: Sequence[DirectoryEntry], raw: str) -> DirectoryEntry:
    if not (raw.isascii() and raw.isdigit()):
        raise InputError(
            code="unknown_command",
            message=f"Unknown command: {raw}",
            severity="warning",
        )
    index = int(raw)
    if index >= len(entries):
        raise InputError(
            code="invalid_index",
            message="Invalid index!",
            detail=f"expected 0-{len(entries) - 1}" if entries else "the listing is empty",
            severity="warning",
        )
    return entries[index]


def select_entry(store: SessionStore, entry: DirectoryEntry) -> Path | None:
    """Enter ``entry`` if it is a directory; otherwise return the file to act on."""
    if entry.is_directory:
        store.set_current_dir(entry.full_path)
        return None
    return entry.full_path
