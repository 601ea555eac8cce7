"""Brute-force result rendering for the CLI layer.

Shows every candidate decryption, as a Rich table when Rich is
installed and as aligned plain lines otherwise.  All computation is
delegated to :func:`caesar_cipher.core.brute_force.brute_force`.
"""

from __future__ import annotations

from collections.abc import Sequence

from caesar_cipher.cli.console import output
from caesar_cipher.core.brute_force import brute_force
from caesar_cipher.core.models import BruteForceCandidate


def _format_candidate_line(candidate: BruteForceCandidate) -> str:
    """Format one candidate as ``"Shift  3: text"``."""
    return f"Shift {candidate.shift:2}: {candidate.text}"


def _print_heading(text: str) -> None:
    """Print the heading lines shared by the table and plain renderings."""
    output.text("")
    output.text("=== Brute Force Decryption ===")
    output.text(f"Original: {text}")


def _print_plain(candidates: Sequence[BruteForceCandidate]) -> None:
    """Render candidates without Rich."""
    output.text("Trying all possible shifts:")
    for candidate in candidates:
        output.text(_format_candidate_line(candidate))


def _print_table(candidates: Sequence[BruteForceCandidate]) -> None:
    """Render candidates as a Rich table."""
    from rich.table import Table
    from rich.text import Text

    table = Table(
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Shift", justify="right", style="dim", width=5)
    table.add_column("Candidate", justify="left", overflow="fold")

    for candidate in candidates:
        table.add_row(str(candidate.shift), Text(candidate.text))

    output.print(table)


def show_brute_force(text: str) -> list[BruteForceCandidate]:
    """Display every decryption candidate for *text* and return them."""
    candidates = brute_force(text)
    _print_heading(text)
    try:
        import rich.table  # noqa: F401
    except ModuleNotFoundError:
        _print_plain(candidates)
    else:
        _print_table(candidates)
    return candidates
