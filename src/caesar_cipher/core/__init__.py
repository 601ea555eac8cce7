"""Core layer — the cipher transform and pure helpers around it.

Rules
-----
* No ``print()`` calls and no logging.
* No filesystem or terminal I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from caesar_cipher.core.brute_force import brute_force
from caesar_cipher.core.cipher import (
    decrypt,
    decrypt_checked,
    encrypt,
    encrypt_checked,
    normalize_shift,
    shift_text,
)
from caesar_cipher.core.models import BruteForceCandidate, ShiftInput
from caesar_cipher.core.shift_input import parse_shift_input

__all__: list[str] = [
    "BruteForceCandidate",
    "ShiftInput",
    "brute_force",
    "decrypt",
    "decrypt_checked",
    "encrypt",
    "encrypt_checked",
    "normalize_shift",
    "parse_shift_input",
    "shift_text",
]
