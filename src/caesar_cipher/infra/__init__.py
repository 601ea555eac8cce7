"""Infrastructure layer — filesystem integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~caesar_cipher.exceptions.CaesarCipherError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from caesar_cipher.infra.text_files import check_input_size, read_text_file, write_text_file

__all__: list[str] = [
    "check_input_size",
    "read_text_file",
    "write_text_file",
]
