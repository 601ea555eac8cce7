"""CLI console helpers with optional Rich support.

Two proxies are exposed:

* ``console`` writes diagnostics (errors, hints, banners) to stderr.
* ``output`` writes command results to stdout so they can be piped.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from caesar_cipher.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def escape_markup(value: object) -> str:
    """Return ``str(value)`` safe to embed in a Rich markup string.

    Paths and exception text may contain ``[...]``.  Without Rich the
    plain fallback never parses markup, so the text is returned as is.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return str(value)
    return escape(str(value))


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, **options: Any) -> None:
        """Render with Rich when available, else plain print.

        *options* are Rich ``Console.print`` keyword arguments and are
        ignored by the plain fallback.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except MissingDependencyError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        rich_console.print(*objects, **options)

    def text(self, value: str) -> None:
        """Print *value* byte-for-byte, bypassing Rich.

        Rich would interpret markup, strip control characters such as
        ``\\r`` and expand tabs; cipher text must survive unchanged.
        Characters the stream cannot encode (lone surrogates from
        undecodable arguments) are written as backslash escapes.
        """
        stream = sys.stderr if self._stderr else sys.stdout
        try:
            print(value, file=stream, flush=True)
        except UnicodeEncodeError:
            encoding = getattr(stream, "encoding", None) or "utf-8"
            escaped = value.encode(encoding, "backslashreplace").decode(encoding)
            print(escaped, file=stream, flush=True)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
