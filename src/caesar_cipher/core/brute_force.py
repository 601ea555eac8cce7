"""Brute-force decryption over every possible shift."""

from __future__ import annotations

from caesar_cipher.core.cipher import decrypt
from caesar_cipher.core.models import BruteForceCandidate
from caesar_cipher.utils.constants import MAX_BRUTE_FORCE_SHIFT


def brute_force(text: str) -> list[BruteForceCandidate]:
    """Decrypt *text* with every shift from 0 to 25 inclusive.

    Shift 0 reproduces *text* unchanged, which keeps the original in
    view alongside the candidates.
    """
    return [
        BruteForceCandidate(shift=shift, text=decrypt(text, shift))
        for shift in range(MAX_BRUTE_FORCE_SHIFT + 1)
    ]
