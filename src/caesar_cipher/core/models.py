"""Domain models for caesar-cipher.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BruteForceCandidate:
    """One decryption attempt produced by brute force."""

    shift: int
    """Shift that was undone to produce :attr:`text`."""

    text: str
    """Candidate plaintext."""


@dataclass(frozen=True, slots=True)
class ShiftInput:
    """Result of parsing a shift typed by the user."""

    shift: int
    """Shift to use; the default when the input was blank or invalid."""

    warning: str | None
    """Message to show the user, or ``None`` when the input was fine."""
