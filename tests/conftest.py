from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory and the logging subsystem.
3. A helper fixture to materialize directory trees from dictionaries.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Dict, Iterator, Union

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from bytetree.infra.logging import shutdown_logging  # noqa: E402

Layout = Dict[str, Union[str, bytes, "Layout"]]


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "gui: controller tests driven through mocked widgets")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_user_dir(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the user data directory (config, logs) into the test sandbox."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home))
    return home


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Tear down any logging handlers installed by the code under test."""
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[str, Layout], Path]:
    """
    Return a factory that materializes a nested dict as files and folders.

    String values are written as UTF-8 text without newline translation,
    bytes are written verbatim, and dict values become subdirectories.
    """
    def _make(name: str, layout: Layout) -> Path:
        root = tmp_path / name
        root.mkdir()
        _populate(root, layout)
        return root

    return _make


def _populate(base: Path, layout: Layout) -> None:
    for entry, content in layout.items():
        target = base / entry
        if isinstance(content, dict):
            target.mkdir()
            _populate(target, content)
        elif isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_bytes(content.encode("utf-8"))
