from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Callable


class ClipboardMode(Enum):
    EMPTY = "empty"
    COPY = "copy"
    CUT = "cut"


@dataclass(frozen=True, slots=True)
class Clipboard:
    """Single-slot clipboard: ``EMPTY`` carries no path, ``COPY``/``CUT`` carry one."""

    mode: ClipboardMode = ClipboardMode.EMPTY
    path: Path | None = None

    def __post_init__(self) -> None:
        if self.mode is ClipboardMode.EMPTY and self.path is not None:
            raise ValueError("an empty clipboard cannot hold a path")
        if self.mode is not ClipboardMode.EMPTY and self.path is None:
            raise ValueError(f"a {self.mode.value} clipboard requires a path")

    @classmethod
    def empty(cls) -> Clipboard:
        return cls()

    @classmethod
    def copy(cls, path: Path) -> Clipboard:
        return cls(ClipboardMode.COPY, path)

    @classmethod
    def cut(cls, path: Path) -> Clipboard:
        return cls(ClipboardMode.CUT, path)

    @property
    def is_empty(self) -> bool:
        return self.mode is ClipboardMode.EMPTY

    @property
    def name(self) -> str:
        return self.path.name if self.path is not None else ""


@dataclass(frozen=True, slots=True)
class SessionState:
    current_dir: Path
    clipboard: Clipboard = field(default_factory=Clipboard.empty)


class SessionStore:
    def __init__(self, initial: SessionState) -> None:
        self._state = initial
        self._listeners: set[Callable[[SessionState], None]] = set()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current_dir(self) -> Path:
        return self._state.current_dir

    @property
    def clipboard(self) -> Clipboard:
        return self._state.clipboard

    def subscribe(self, callback: Callable[[SessionState], None]) -> None:
        self._listeners.add(callback)
        callback(self._state)

    def unsubscribe(self, callback: Callable[[SessionState], None]) -> None:
        self._listeners.discard(callback)

    def set_current_dir(self, value: Path) -> None:
        self._update_state(current_dir=value)

    def set_clipboard(self, value: Clipboard) -> None:
        self._update_state(clipboard=value)

    def _update_state(self, **changes: object) -> None:
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return
        self._state = new_state
        for callback in list(self._listeners):
            callback(self._state)
