"""
Typed errors raised by the template generator and its CLI shell.

Callers branch on ``EnvTemplateError.kind`` rather than on message text.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Every failure the generator surfaces to its caller."""

    INPUT_NOT_FOUND = "INPUT_NOT_FOUND"
    INPUT_READ_FAILED = "INPUT_READ_FAILED"
    OUTPUT_WRITE_FAILED = "OUTPUT_WRITE_FAILED"
    NO_ENV_FILES = "NO_ENV_FILES"
    INVALID_OPTION = "INVALID_OPTION"


class EnvTemplateError(Exception):
    """Raised when a template cannot be generated.

    Attributes:
        kind:    Discriminant for the failure (see ``ErrorKind``).
        message: Human-readable reason, usually naming the offending path.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": str(self.kind), "error": self.message}
