"""CLI application entry point and command routing for caesar-cipher.

This module is the **sole error boundary** for the entire application.
It catches :class:`~caesar_cipher.exceptions.CaesarCipherError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No cipher logic lives here — all work is delegated to the core and
  infrastructure layers.
* Results go to stdout through ``output``; diagnostics go to stderr
  through ``console``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from caesar_cipher.cli import exit_codes
from caesar_cipher.cli.console import (
    console,
    escape_markup,
    import_questionary,
    output,
)
from caesar_cipher.exceptions import CaesarCipherError, InputSourceError
from caesar_cipher.utils.constants import DEFAULT_SHIFT
from caesar_cipher.utils.log import setup_logging
from caesar_cipher.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the ``--text`` / ``--file`` input source options."""
    parser.add_argument("-t", "--text", default=None, help="Text to process.")
    parser.add_argument("-f", "--file", default=None, help="Input file path.")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``caesar-cipher encrypt|decrypt [options]``
    * ``caesar-cipher interactive``
    * ``caesar-cipher brute-force [options]``
    * ``caesar-cipher`` with no command — demonstration mode
    """
    parser = argparse.ArgumentParser(
        prog="caesar-cipher",
        description="A Caesar cipher encryption/decryption tool.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    for name, summary in (
        ("encrypt", "Encrypt text using Caesar cipher."),
        ("decrypt", "Decrypt text using Caesar cipher."),
    ):
        cipher_parser = subparsers.add_parser(name, help=summary, description=summary)
        _add_source_arguments(cipher_parser)
        cipher_parser.add_argument(
            "-s",
            "--shift",
            type=int,
            default=DEFAULT_SHIFT,
            help=f"Shift value (any integer; safe mode: -25 to 25, default: {DEFAULT_SHIFT}).",
        )
        cipher_parser.add_argument("-o", "--output", default=None, help="Output file path.")
        cipher_parser.add_argument(
            "--safe",
            action="store_true",
            help="Use safe mode with error checking.",
        )

    subparsers.add_parser(
        "interactive",
        help="Interactive mode.",
        description="Repeatedly encrypt, decrypt, or brute force until you quit.",
    )

    brute_parser = subparsers.add_parser(
        "brute-force",
        help="Show all possible decryptions (brute force).",
        description="Show all possible decryptions (brute force).",
    )
    _add_source_arguments(brute_parser)
    return parser


# ---------------------------------------------------------------------------
# Input / output plumbing
# ---------------------------------------------------------------------------

def _read_stdin_text() -> str:
    """Obtain text from stdin: a prompt on a terminal, else the whole stream."""
    from caesar_cipher.infra.text_files import check_input_size

    if sys.stdin.isatty():
        answer: str | None = import_questionary().text("Enter text:").ask()
        if answer is None:
            raise InputSourceError("No input text provided.")
        return check_input_size(answer.strip())

    logger.debug("Reading input text from stdin")
    try:
        data = sys.stdin.read()
    except UnicodeDecodeError as exc:
        raise InputSourceError(f"Failed to read standard input: {exc}") from exc
    return check_input_size(data.removesuffix("\n"))


def _resolve_input_text(text: str | None, file: str | None) -> str:
    """Return input from ``--text``, ``--file``, or stdin, in that order.

    Raises
    ------
    InputSourceError
        If both ``--text`` and ``--file`` are given, or the source
        cannot be read.
    InputTooLargeError
        If the input exceeds the size limit.
    """
    from caesar_cipher.infra.text_files import check_input_size, read_text_file

    if text is not None and file is not None:
        raise InputSourceError(
            "Cannot specify both text and file",
            hint="Pass either --text or --file, not both.",
        )
    if text is not None:
        logger.debug("Using input text from --text (%d characters)", len(text))
        return check_input_size(text)
    if file is not None:
        return read_text_file(file)
    return _read_stdin_text()


def _emit_result(result: str, output_file: str | None) -> None:
    """Write *result* to *output_file*, or print it to stdout."""
    from caesar_cipher.infra.text_files import write_text_file

    if output_file is None:
        output.text(result)
        return
    write_text_file(output_file, result)
    console.print(f"Result written to file: {output_file}", markup=False)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_cipher(args: argparse.Namespace) -> int:
    """Dispatch ``encrypt`` / ``decrypt``, permissive or checked."""
    from caesar_cipher.core import cipher

    input_text = _resolve_input_text(args.text, args.file)

    if args.command == "encrypt":
        operation = cipher.encrypt_checked if args.safe else cipher.encrypt
    else:
        operation = cipher.decrypt_checked if args.safe else cipher.decrypt

    logger.debug(
        "Running %s (shift=%d, safe=%s)", args.command, args.shift, args.safe,
    )
    result = operation(input_text, args.shift)
    _emit_result(result, args.output)
    return exit_codes.SUCCESS


def _handle_interactive() -> int:
    """Dispatch the ``interactive`` command."""
    from caesar_cipher.cli.interactive import run_interactive

    return run_interactive()


def _handle_brute_force(args: argparse.Namespace) -> int:
    """Dispatch the ``brute-force`` command."""
    from caesar_cipher.cli.brute_force_view import show_brute_force

    show_brute_force(_resolve_input_text(args.text, args.file))
    return exit_codes.SUCCESS


def _handle_demo() -> int:
    """Run the demonstration shown when no command is given."""
    from caesar_cipher.cli.demo import run_demo

    return run_demo()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the caesar-cipher CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    logger.debug("Dispatching command %r", args.command)

    if args.command is None:
        return _handle_demo()
    if args.command in ("encrypt", "decrypt"):
        return _handle_cipher(args)
    if args.command == "interactive":
        return _handle_interactive()
    return _handle_brute_force(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CaesarCipherError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
