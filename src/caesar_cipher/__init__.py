"""caesar-cipher — Caesar shift encryption and decryption.

Permissive and checked cipher functions with a layered CLI on top.
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
from caesar_cipher.exceptions import (
    CipherError,
    CipherErrorKind,
    EmptyInputError,
    InvalidShiftError,
)
from caesar_cipher.version import __version__

__all__: list[str] = [
    "CipherError",
    "CipherErrorKind",
    "EmptyInputError",
    "InvalidShiftError",
    "__version__",
    "brute_force",
    "decrypt",
    "decrypt_checked",
    "encrypt",
    "encrypt_checked",
    "normalize_shift",
    "shift_text",
]
