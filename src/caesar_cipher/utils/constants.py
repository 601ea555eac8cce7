"""Centralised constants for caesar-cipher.

Every tunable value lives here so that no layer hardcodes alphabet
geometry, shift bounds, or input limits.
"""

from __future__ import annotations

ALPHABET_SIZE: int = 26
"""Number of letters in each case-alphabet (A-Z, a-z)."""

MAX_SHIFT: int = 25
"""Largest absolute shift accepted by the checked variants."""

MIN_SHIFT: int = -MAX_SHIFT
"""Smallest shift accepted by the checked variants."""

UPPERCASE_BASE: int = ord("A")
"""Code point of the first uppercase letter."""

LOWERCASE_BASE: int = ord("a")
"""Code point of the first lowercase letter."""

MAX_BRUTE_FORCE_SHIFT: int = 25
"""Highest shift tried by brute-force decryption (inclusive)."""

DEFAULT_SHIFT: int = 3
"""Shift used when none is given or the typed value cannot be parsed."""

MAX_INPUT_SIZE: int = 10 * 1024 * 1024
"""Maximum input size in bytes (UTF-8) for text, files, and stdin."""
