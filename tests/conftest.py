"""Shared pytest fixtures and configuration for the caesar-cipher test suite.

Guidelines
----------
* No terminal interaction in any test — questionary is always mocked.
* Core tests must be pure — no side effects.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Callable, Iterator

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo the handlers ``setup_logging`` installs during CLI tests."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fake_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Replace ``sys.stdin`` with a non-terminal stream holding *data*."""

    def _install(data: str) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(data))

    return _install


@pytest.fixture
def hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ``rich`` import fail as if the package were absent."""
    for name in (
        "rich", "rich.console", "rich.logging", "rich.markup", "rich.table", "rich.text",
    ):
        monkeypatch.setitem(sys.modules, name, None)
