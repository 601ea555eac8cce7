"""Demonstration shown when ``caesar-cipher`` runs without a command."""

from __future__ import annotations

from caesar_cipher.cli import exit_codes
from caesar_cipher.cli.console import output
from caesar_cipher.core.cipher import decrypt, encrypt, encrypt_checked
from caesar_cipher.exceptions import CipherError

_USAGE_EXAMPLES: tuple[str, ...] = (
    'caesar-cipher encrypt --text "Hello World" --shift 5',
    'caesar-cipher decrypt --text "Mjqqt Btwqi" --shift 5',
    "caesar-cipher interactive",
    'caesar-cipher brute-force --text "Mjqqt Btwqi"',
    "caesar-cipher --help",
)


def _show_checked(label: str, text: str, shift: int) -> None:
    try:
        result = encrypt_checked(text, shift)
    except CipherError as exc:
        output.text(f"Error: {exc}")
    else:
        output.text(f"{label}: {result}")


def run_demo() -> int:
    """Print basic, mixed-case, and checked-mode examples plus CLI usage."""
    output.print("[bold]=== Caesar Cipher Demo ===[/bold]")
    output.text("Run with --help to see CLI options")

    text = "I Love You."
    encrypted = encrypt(text, 3)
    output.print()
    output.print("[bold]=== Basic Features ===[/bold]")
    output.text(f"Original: {text}")
    output.text(f"Encrypted: {encrypted}")
    output.text(f"Decrypted (encrypt): {encrypt(encrypted, -3)}")
    output.text(f"Decrypted (decrypt): {decrypt(encrypted, 3)}")

    mixed = "Hello World! 123"
    encrypted_mixed = encrypt(mixed, 5)
    output.print()
    output.print("[bold]=== Mixed Case Test ===[/bold]")
    output.text(f"Original: {mixed}")
    output.text(f"Encrypted: {encrypted_mixed}")
    output.text(f"Decrypted: {decrypt(encrypted_mixed, 5)}")

    output.print()
    output.print("[bold]=== Error Handling Test ===[/bold]")
    _show_checked("Valid encryption", "Test Message", 3)
    _show_checked("Empty text encryption", "", 3)
    _show_checked("Invalid shift result", "Test", 30)

    output.print()
    output.print("[bold]=== CLI Usage Examples ===[/bold]")
    for example in _USAGE_EXAMPLES:
        output.text(example)
    return exit_codes.SUCCESS
