"""Tests for the permissive transform (core/cipher.py).

Every test is a pure function call — no I/O, no mocking.  These tests
exercise:

* Known encrypt/decrypt scenarios
* Shift normalisation (negative, periodic, extreme values)
* Length, case, and non-letter preservation
* Round-trips for a spread of texts and shifts
"""

from __future__ import annotations

import string

import pytest

from caesar_cipher.core.cipher import decrypt, encrypt, normalize_shift, shift_text

TEXTS: list[str] = [
    "",
    "Hello",
    "Hello, World! 123",
    "The quick brown fox jumps over the lazy dog",
    string.ascii_letters,
    "Ünïcödé straße — 日本語 🙂 ok",
    "tabs\tand\nnewlines\r\n",
]

SHIFTS: list[int] = [
    0, 1, 3, 13, 25, 26, 27, -1, -3, -25, -26, -27, 52, -52, 9999, -9999,
]

EXTREME_SHIFTS: list[int] = [
    2**15 - 1,
    -(2**15),
    2**31 - 1,
    -(2**31),
    2**63 - 1,
    -(2**63),
    10**100,
    -(10**100),
]


# ---------------------------------------------------------------------------
# Known scenarios
# ---------------------------------------------------------------------------

class TestKnownScenarios:
    def test_encrypt_hello(self) -> None:
        assert encrypt("Hello", 3) == "Khoor"

    def test_decrypt_khoor(self) -> None:
        assert decrypt("Khoor", 3) == "Hello"

    def test_punctuation_and_digits_untouched(self) -> None:
        assert encrypt("Hello, World! 123", 3) == "Khoor, Zruog! 123"

    def test_negative_shift_wraps_backwards(self) -> None:
        assert encrypt("ABC", -1) == "ZAB"

    def test_shift_past_alphabet_wraps(self) -> None:
        assert encrypt("ABC", 27) == "BCD"

    def test_wraps_end_of_alphabet(self) -> None:
        assert encrypt("xyz XYZ", 3) == "abc ABC"

    def test_rot13_is_self_inverse(self) -> None:
        assert encrypt(encrypt("Caesar", 13), 13) == "Caesar"

    def test_decrypt_via_negative_encrypt(self) -> None:
        encrypted = encrypt("I Love You.", 3)
        assert encrypted == "L Oryh Brx."
        assert encrypt(encrypted, -3) == "I Love You."

    def test_empty_text(self) -> None:
        assert encrypt("", 5) == ""
        assert decrypt("", 5) == ""

    def test_zero_shift_is_identity(self) -> None:
        assert encrypt("Hello", 0) == "Hello"

    def test_shift_text_matches_encrypt(self) -> None:
        assert shift_text("Hello", 3) == encrypt("Hello", 3)

    def test_input_is_not_modified(self) -> None:
        original = "Hello"
        encrypt(original, 3)
        assert original == "Hello"


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------

class TestNormalizeShift:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [(0, 0), (3, 3), (25, 25), (26, 0), (27, 1), (-1, 25), (-26, 0), (-27, 25)],
    )
    def test_known_values(self, amount: int, expected: int) -> None:
        assert normalize_shift(amount) == expected

    @pytest.mark.parametrize("amount", SHIFTS + EXTREME_SHIFTS)
    def test_always_in_range(self, amount: int) -> None:
        assert 0 <= normalize_shift(amount) <= 25

    def test_rejects_non_integer(self) -> None:
        with pytest.raises(TypeError):
            normalize_shift(3.5)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------

class TestInvariants:
    @pytest.mark.parametrize("text", TEXTS)
    @pytest.mark.parametrize("shift", SHIFTS)
    def test_length_preserved(self, text: str, shift: int) -> None:
        assert len(encrypt(text, shift)) == len(text)

    @pytest.mark.parametrize("text", TEXTS)
    @pytest.mark.parametrize("shift", SHIFTS)
    def test_round_trip(self, text: str, shift: int) -> None:
        assert decrypt(encrypt(text, shift), shift) == text
        assert encrypt(encrypt(text, shift), -shift) == text

    @pytest.mark.parametrize("shift", SHIFTS)
    def test_case_preserved(self, shift: int) -> None:
        assert encrypt(string.ascii_uppercase, shift).isupper()
        assert encrypt(string.ascii_lowercase, shift).islower()

    @pytest.mark.parametrize("shift", SHIFTS)
    def test_every_letter_stays_in_its_alphabet(self, shift: int) -> None:
        assert sorted(encrypt(string.ascii_uppercase, shift)) == list(string.ascii_uppercase)
        assert sorted(encrypt(string.ascii_lowercase, shift)) == list(string.ascii_lowercase)

    @pytest.mark.parametrize(
        "text",
        [
            string.digits,
            string.punctuation,
            string.whitespace,
            "αβγδ ЖЗИЙ",
            "日本語のテキスト",
            "🙂🚀✨",
            "ÄÖÜäöüßéèçñ",
            "@[`{",  # neighbours of the letter ranges
        ],
    )
    def test_non_letters_unchanged(self, text: str) -> None:
        for shift in (1, 7, 13, 25, -5):
            assert encrypt(text, shift) == text

    @pytest.mark.parametrize("text", TEXTS)
    @pytest.mark.parametrize("shift", [0, 1, 5, -7, 25, 9999])
    def test_periodic_in_26(self, text: str, shift: int) -> None:
        assert encrypt(text, shift) == encrypt(text, shift + 26)
        assert encrypt(text, shift) == encrypt(text, shift - 26)


# ---------------------------------------------------------------------------
# Extreme values
# ---------------------------------------------------------------------------

class TestExtremeShifts:
    @pytest.mark.parametrize("shift", EXTREME_SHIFTS)
    def test_encrypt_matches_normalized_shift(self, shift: int) -> None:
        assert encrypt("Hello, World!", shift) == encrypt(
            "Hello, World!", normalize_shift(shift),
        )

    @pytest.mark.parametrize("shift", EXTREME_SHIFTS)
    def test_round_trip(self, shift: int) -> None:
        text = "Extreme Values Survive"
        assert decrypt(encrypt(text, shift), shift) == text

    def test_most_negative_64_bit_value(self) -> None:
        shift = -(2**63)
        # -(2**63) % 26 == 18
        assert encrypt("A", shift) == "S"
        assert decrypt("S", shift) == "A"
