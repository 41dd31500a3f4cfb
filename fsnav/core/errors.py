from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning", "information"]

DEFAULT_SEVERITY_BY_CODE: dict[str, Severity] = {
    "clipboard_empty": "information",
    "clipboard_already_empty": "information",
}


@dataclass
class FsnavError(Exception):
    code: str
    message: str
    detail: str | None = None
    severity: Severity = "error"

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class IoError(FsnavError):
    """A filesystem read, write, rename, delete, copy or create failed."""


class ValidationError(FsnavError):
    """A request was rejected before touching the filesystem."""


class InputError(FsnavError):
    """The user typed something that is not a command or a valid index."""


class LaunchError(FsnavError):
    """The default-application launcher could not be spawned."""


def format_error(error: BaseException) -> tuple[str, Severity]:
    if isinstance(error, FsnavError):
        severity = DEFAULT_SEVERITY_BY_CODE.get(error.code, error.severity)
        return f"{error}", severity
    return f"{error}", "error"


def wrap_error(
    error: BaseException,
    *,
    code: str,
    message: str,
    kind: type[FsnavError] = IoError,
    severity: Severity = "error",
) -> FsnavError:
    if isinstance(error, FsnavError):
        return error
    if isinstance(error, OSError) and error.strerror:
        detail = error.strerror
    else:
        detail = str(error)
    return kind(code=code, message=message, detail=detail, severity=severity)
