"""Parsing of shift values typed at an interactive prompt.

Never raises: unusable input falls back to :data:`DEFAULT_SHIFT` and
reports why through :attr:`ShiftInput.warning`.
"""

from __future__ import annotations

from caesar_cipher.core.models import ShiftInput
from caesar_cipher.utils.constants import DEFAULT_SHIFT, MAX_SHIFT, MIN_SHIFT


def parse_shift_input(raw: str) -> ShiftInput:
    """Parse *raw* into a shift, with an optional warning.

    * Blank input selects the default silently.
    * Integers outside ``[-25, 25]`` are kept but flagged, since the
      permissive transform normalises them.
    * Anything else selects the default with a warning.
    """
    trimmed = raw.strip()
    if not trimmed:
        return ShiftInput(shift=DEFAULT_SHIFT, warning=None)

    try:
        shift = int(trimmed)
    except ValueError:
        return ShiftInput(
            shift=DEFAULT_SHIFT,
            warning=f"Invalid shift value, using default ({DEFAULT_SHIFT})",
        )

    if not MIN_SHIFT <= shift <= MAX_SHIFT:
        return ShiftInput(
            shift=shift,
            warning=(
                f"Warning: shift {shift} is outside the typical range "
                f"({MIN_SHIFT} to {MAX_SHIFT}). Value will be normalized."
            ),
        )
    return ShiftInput(shift=shift, warning=None)
