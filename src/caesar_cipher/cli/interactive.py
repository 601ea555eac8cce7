"""Interactive session for the CLI layer.

Repeatedly offers encrypt, decrypt, and brute-force operations via
questionary prompts until the user quits.  Pressing Ctrl+C or Esc at
any prompt ends the session cleanly (questionary returns ``None``).

All cipher work is delegated to the core layer; this module only
prompts and renders.
"""

from __future__ import annotations

import logging
from typing import Any

from caesar_cipher.cli import exit_codes
from caesar_cipher.cli.brute_force_view import show_brute_force
from caesar_cipher.cli.console import console, import_questionary, output
from caesar_cipher.core.cipher import decrypt, encrypt
from caesar_cipher.core.shift_input import parse_shift_input
from caesar_cipher.utils.constants import DEFAULT_SHIFT

logger = logging.getLogger(__name__)

OPERATION_ENCRYPT = "encrypt"
OPERATION_DECRYPT = "decrypt"
OPERATION_BRUTE_FORCE = "brute-force"
OPERATION_QUIT = "quit"


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def _ask_operation(questionary: Any) -> str | None:
    """Ask which operation to run next.  ``None`` means Ctrl+C / Esc."""
    choices = [
        questionary.Choice(title="Encrypt", value=OPERATION_ENCRYPT),
        questionary.Choice(title="Decrypt", value=OPERATION_DECRYPT),
        questionary.Choice(title="Brute force", value=OPERATION_BRUTE_FORCE),
        questionary.Choice(title="Quit", value=OPERATION_QUIT),
    ]
    selected: str | None = questionary.select(
        "Choose operation:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=True,
    ).ask()
    return selected


def _ask_text(questionary: Any, message: str) -> str | None:
    """Ask for a line of text, trimmed.  ``None`` means Ctrl+C / Esc."""
    answer: str | None = questionary.text(message).ask()
    if answer is None:
        return None
    return answer.strip()


def _ask_shift(questionary: Any) -> int | None:
    """Ask for a shift; blank or invalid input falls back to the default."""
    answer: str | None = questionary.text(
        f"Enter shift value (default: {DEFAULT_SHIFT}):",
    ).ask()
    if answer is None:
        return None
    parsed = parse_shift_input(answer)
    if parsed.warning is not None:
        console.print(f"[yellow]{parsed.warning}[/yellow]", highlight=False)
    return parsed.shift


# ---------------------------------------------------------------------------
# Session loop
# ---------------------------------------------------------------------------

def _run_operation(questionary: Any, operation: str) -> bool:
    """Run one *operation*.  Returns ``False`` when the user aborted."""
    if operation == OPERATION_BRUTE_FORCE:
        text = _ask_text(questionary, "Enter text to brute force decrypt:")
        if text is None:
            return False
        show_brute_force(text)
        return True

    verb = "encrypt" if operation == OPERATION_ENCRYPT else "decrypt"
    text = _ask_text(questionary, f"Enter text to {verb}:")
    if text is None:
        return False
    shift = _ask_shift(questionary)
    if shift is None:
        return False

    logger.debug("Interactive %s with shift %d", verb, shift)
    if operation == OPERATION_ENCRYPT:
        output.text(f"Encrypted: {encrypt(text, shift)}")
    else:
        output.text(f"Decrypted: {decrypt(text, shift)}")
    return True


def run_interactive() -> int:
    """Run the interactive session until the user quits.

    Returns
    -------
    int
        Always :data:`exit_codes.SUCCESS`; quitting is a normal exit.

    Raises
    ------
    MissingDependencyError
        If questionary is not installed.
    """
    questionary = import_questionary()

    console.print("[bold]=== Caesar Cipher Interactive Mode ===[/bold]")
    console.print("Choose 'Quit' or press Ctrl+C to exit")

    while True:
        operation = _ask_operation(questionary)
        if operation is None or operation == OPERATION_QUIT:
            break
        if not _run_operation(questionary, operation):
            break

    console.print("Goodbye!")
    return exit_codes.SUCCESS
