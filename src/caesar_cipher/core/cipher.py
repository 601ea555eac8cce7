"""Caesar shift transform and its checked variants.

Every function in this module is a **pure** transformation — no I/O,
no logging, no side effects, fully deterministic.

Two policies live side by side:

* :func:`encrypt` / :func:`decrypt` accept any integer shift and
  normalise it modulo 26.  They never raise for a ``str`` input.
* :func:`encrypt_checked` / :func:`decrypt_checked` reject empty text
  and shifts whose magnitude exceeds :data:`MAX_SHIFT`.
"""

from __future__ import annotations

import operator
from functools import lru_cache

from caesar_cipher.exceptions import EmptyInputError, InvalidShiftError
from caesar_cipher.utils.constants import (
    ALPHABET_SIZE,
    LOWERCASE_BASE,
    MAX_SHIFT,
    UPPERCASE_BASE,
)


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------

def normalize_shift(amount: int) -> int:
    """Reduce *amount* to its residue in ``[0, 25]``.

    Python's ``%`` is floor modulo, so the result takes the sign of the
    divisor even for negative or arbitrarily large *amount*.
    """
    return operator.index(amount) % ALPHABET_SIZE


@lru_cache(maxsize=ALPHABET_SIZE)
def _translation_table(offset: int) -> dict[int, int]:
    """Build the ``str.translate`` table for a normalised *offset*."""
    table: dict[int, int] = {}
    for base in (UPPERCASE_BASE, LOWERCASE_BASE):
        for index in range(ALPHABET_SIZE):
            table[base + index] = base + (index + offset) % ALPHABET_SIZE
    return table


# ---------------------------------------------------------------------------
# Permissive transform
# ---------------------------------------------------------------------------

def shift_text(text: str, amount: int) -> str:
    """Shift every Latin letter in *text* by *amount* positions.

    Uppercase letters rotate within ``A``-``Z`` and lowercase letters
    within ``a``-``z``; all other code points are copied verbatim.
    The result always has the same length as *text*.
    """
    return text.translate(_translation_table(normalize_shift(amount)))


def encrypt(text: str, shift: int) -> str:
    """Encrypt *text* with a Caesar shift of *shift*.

    >>> encrypt("Hello", 3)
    'Khoor'
    """
    return shift_text(text, shift)


def decrypt(text: str, shift: int) -> str:
    """Decrypt *text* that was encrypted with *shift*.

    >>> decrypt("Khoor", 3)
    'Hello'
    """
    return shift_text(text, -normalize_shift(shift))


# ---------------------------------------------------------------------------
# Checked variants
# ---------------------------------------------------------------------------

def _validate(text: str, shift: int) -> None:
    """Raise the first violated precondition, empty text before shift."""
    if len(text) == 0:
        raise EmptyInputError()
    if abs(operator.index(shift)) > MAX_SHIFT:
        raise InvalidShiftError(shift)


def encrypt_checked(text: str, shift: int) -> str:
    """Encrypt *text* after validating the inputs.

    Raises
    ------
    EmptyInputError
        If *text* is empty.  Checked before the shift.
    InvalidShiftError
        If ``abs(shift)`` is greater than :data:`MAX_SHIFT`.
    """
    _validate(text, shift)
    return shift_text(text, shift)


def decrypt_checked(text: str, shift: int) -> str:
    """Decrypt *text* after validating the inputs.

    The error for an out-of-range shift reports *shift* exactly as the
    caller passed it.

    Raises
    ------
    EmptyInputError
        If *text* is empty.  Checked before the shift.
    InvalidShiftError
        If ``abs(shift)`` is greater than :data:`MAX_SHIFT`.
    """
    _validate(text, shift)
    return shift_text(text, -shift)
