"""Infrastructure: reading and writing text files for the CLI.

Rules
-----
* Every ``OSError`` is re-raised as a typed
  :class:`~caesar_cipher.exceptions.CaesarCipherError` subclass that
  names the offending path.
* Size limits are enforced before content is loaded.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from caesar_cipher.exceptions import (
    InputSourceError,
    InputTooLargeError,
    OutputWriteError,
)
from caesar_cipher.utils.constants import MAX_INPUT_SIZE

logger = logging.getLogger(__name__)


def check_input_size(text: str, source: str = "Input text") -> str:
    """Return *text* unchanged, or raise if it is over the size limit.

    The limit applies to the UTF-8 encoded size, matching what a file
    of the same content would weigh on disk.  Lone surrogates (from
    undecodable command-line bytes) are counted, not rejected.
    """
    size = len(text.encode("utf-8", "surrogatepass"))
    if size > MAX_INPUT_SIZE:
        raise InputTooLargeError(
            f"{source} exceeds maximum size of {MAX_INPUT_SIZE} bytes",
        )
    return text


def read_text_file(path: str | Path) -> str:
    """Read a UTF-8 text file, refusing files over :data:`MAX_INPUT_SIZE`.

    Raises
    ------
    InputTooLargeError
        If the file is larger than the limit.
    InputSourceError
        If the file is missing, unreadable, or not valid UTF-8.
    """
    file_path = Path(path)
    try:
        size = file_path.stat().st_size
    except OSError as exc:
        raise InputSourceError(f"Failed to read file '{path}': {exc}") from exc

    if size > MAX_INPUT_SIZE:
        raise InputTooLargeError(
            f"Input file '{path}' exceeds maximum size of {MAX_INPUT_SIZE} bytes",
        )

    logger.debug("Reading %d bytes from %s", size, file_path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputSourceError(f"Failed to read file '{path}': {exc}") from exc


def write_text_file(path: str | Path, content: str) -> None:
    """Write *content* to *path* as UTF-8 without adding a newline.

    Undecodable bytes carried through as surrogate escapes are written
    back out as the original bytes.

    Raises
    ------
    OutputWriteError
        If the file cannot be created or written, or *content* holds
        characters that cannot be encoded.
    """
    file_path = Path(path)
    logger.debug("Writing %d characters to %s", len(content), file_path)
    try:
        with file_path.open(
            "w", encoding="utf-8", errors="surrogateescape", newline="",
        ) as handle:
            handle.write(content)
    except (OSError, UnicodeEncodeError) as exc:
        raise OutputWriteError(
            f"Failed to write file '{path}': {exc}",
            hint="Check that the directory exists and is writable.",
        ) from exc
