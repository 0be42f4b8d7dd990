from __future__ import annotations

"""
Unit tests for report generation (logging preview and persistence).
"""

import logging
import os
import sys
from pathlib import Path

import pytest

from bytetree.core.analysis.tree_generator import generate_tree_report, render_tree


def test_report_matches_render(make_tree) -> None:
    root = make_tree("root", {"a.txt": "abc"})

    assert generate_tree_report(root) == render_tree(root)


def test_report_saved_verbatim(make_tree, tmp_path: Path) -> None:
    root = make_tree("root", {"a.txt": "abc", "sub": {"b.txt": "de"}})
    save_file = tmp_path / "out" / "nested" / "tree.txt"

    report = generate_tree_report(root, save_path=str(save_file))

    assert save_file.exists()
    assert save_file.read_bytes().decode("utf-8") == report


def test_report_preview_logged(make_tree, caplog) -> None:
    root = make_tree("root", {"a.txt": "abc"})

    with caplog.at_level(logging.INFO):
        generate_tree_report(root, print_to_log=True)

    assert "Tree Preview:" in caplog.text
    assert "└─ a.txt 3 bytes" in caplog.text


def test_report_for_missing_path(tmp_path: Path, caplog) -> None:
    save_file = tmp_path / "tree.txt"

    with caplog.at_level(logging.WARNING):
        assert generate_tree_report(tmp_path / "ghost", save_path=str(save_file)) is None

    assert not save_file.exists()
    assert "No file or directory found" in caplog.text


def test_save_failure_is_logged_not_raised(make_tree, tmp_path: Path, caplog) -> None:
    root = make_tree("root", {"a.txt": "abc"})
    blocker = tmp_path / "blocker"
    blocker.write_text("i am a file", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        report = generate_tree_report(root, save_path=str(blocker / "tree.txt"))

    assert report == "root 3 bytes\n└─ a.txt 3 bytes\n"
    assert "Failed to save tree" in caplog.text


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="filesystem rejects names that are not valid UTF-8")
def test_undecodable_names_are_saved_as_original_bytes(make_tree, tmp_path: Path) -> None:
    root = make_tree("root", {})
    with open(os.path.join(os.fsencode(str(root)), b"bad\xff.txt"), "wb") as f:
        f.write(b"abc")
    save_file = tmp_path / "tree.txt"
    name = os.fsdecode(b"bad\xff.txt")

    report = generate_tree_report(root, save_path=str(save_file))

    assert report == f"root 3 bytes\n└─ {name} 3 bytes\n"
    assert save_file.read_bytes() == "root 3 bytes\n└─ ".encode("utf-8") + b"bad\xff.txt 3 bytes\n"
