"""Custom exception hierarchy for caesar-cipher.

All exceptions that cross layer boundaries must inherit from
:class:`CaesarCipherError`.  Raw ``OSError`` instances from file access
must NEVER propagate beyond the infrastructure layer — they are caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
CaesarCipherError
├── CipherError
│   ├── EmptyInputError
│   └── InvalidShiftError
├── InputSourceError
│   └── InputTooLargeError
├── OutputWriteError
└── MissingDependencyError
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from caesar_cipher.utils.constants import MAX_SHIFT


class CaesarCipherError(Exception):
    """Base exception for all caesar-cipher errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Cipher validation -----------------------------------------------------

class CipherErrorKind(Enum):
    """Tag identifying which checked-cipher precondition failed."""

    EMPTY_INPUT = "empty_input"
    INVALID_SHIFT = "invalid_shift"


class CipherError(CaesarCipherError):
    """Raised by the checked cipher variants.

    Callers can branch on :attr:`kind` (or on the concrete subclass)
    without parsing the message text.
    """

    kind: ClassVar[CipherErrorKind]


class EmptyInputError(CipherError):
    """Raised when the text handed to a checked variant is empty."""

    kind = CipherErrorKind.EMPTY_INPUT

    def __init__(self) -> None:
        super().__init__("Input text cannot be empty")


class InvalidShiftError(CipherError):
    """Raised when ``abs(shift)`` exceeds :data:`MAX_SHIFT`."""

    kind = CipherErrorKind.INVALID_SHIFT

    def __init__(self, shift: int, bound: int = MAX_SHIFT) -> None:
        self.shift: int = shift
        self.bound: int = bound
        self.detail: str = (
            f"Shift value {shift} is out of range (-{bound} to {bound})"
        )
        super().__init__(
            f"Invalid shift value: {self.detail}",
            hint="Use the non-safe mode to normalize any shift modulo 26.",
        )


# --- Input / output --------------------------------------------------------

class InputSourceError(CaesarCipherError):
    """Raised when input text cannot be obtained from the requested source."""


class InputTooLargeError(InputSourceError):
    """Raised when input text exceeds the configured size limit."""


class OutputWriteError(CaesarCipherError):
    """Raised when the result cannot be written to the output file."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(CaesarCipherError):
    """Raised when an optional runtime dependency is not available."""
