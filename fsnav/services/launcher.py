from __future__ import annotations

import shlex
import subprocess
import sys
from pathlib import Path
from typing import Protocol, Sequence

from fsnav.core.errors import LaunchError, wrap_error


class DefaultAppLauncher(Protocol):
    def launch(self, path: Path) -> None: ...


class CommandLauncher:
    """Spawns ``command + [path]`` and returns without waiting for it."""

    def __init__(self, command: Sequence[str]) -> None:
        if not command:
            raise ValueError("launcher command cannot be empty")
        self.command = tuple(command)

    def build_argv(self, path: Path) -> list[str]:
        return [*self.command, str(path)]

    def launch(self, path: Path) -> None:
        argv = self.build_argv(path)
        try:
            subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise wrap_error(
                exc,
                code="launch_failed",
                message=f"Could not start '{argv[0]}' to open {path.name}",
                kind=LaunchError,
            ) from exc


class MacLauncher(CommandLauncher):
    def __init__(self) -> None:
        super().__init__(["open"])


class WindowsLauncher(CommandLauncher):
    def __init__(self) -> None:
        # The empty string is the window title that ``start`` expects first.
        super().__init__(["cmd", "/c", "start", ""])


class XdgLauncher(CommandLauncher):
    def __init__(self) -> None:
        super().__init__(["xdg-open"])


def select_launcher(
    platform: str | None = None,
    *,
    open_command: str | None = None,
) -> DefaultAppLauncher:
    if open_command:
        try:
            tokens = shlex.split(open_command)
        except ValueError:
            tokens = open_command.split()
        return CommandLauncher(tokens)

    platform = platform or sys.platform
    if platform == "darwin":
        return MacLauncher()
    if platform == "win32":
        return WindowsLauncher()
    return XdgLauncher()
