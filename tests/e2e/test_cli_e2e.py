from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a separate process to validate argument
parsing, exit codes, stdout content and file side effects.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "bytetree" / "main.py"


def run_cli(args: List[str], home: Path, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a subprocess with an isolated home directory.

    Args:
        args: Command line arguments (excluding interpreter and script).
        home: Directory used as the user's home for config and logs.
        cwd: Optional working directory for the subprocess.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["PYTHONIOENCODING"] = "utf-8"
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def sample_project(make_tree) -> Path:
    """
    Structure:
    /project
      /src
        main.py      (first line: 'def main(): pass')
      /tests
        test_main.py (first line: 'def test_main(): assert True')
      README.md      (first line: '# Dummy Project')
    """
    return make_tree("project", {
        "src": {"main.py": "def main(): pass\n"},
        "tests": {"test_main.py": "def test_main(): assert True\n"},
        "README.md": "# Dummy Project\n",
    })


def test_cli_renders_directory(sample_project: Path, isolated_user_dir: Path) -> None:
    result = run_cli([str(sample_project)], isolated_user_dir)

    assert result.returncode == 0, result.stderr
    assert result.stdout == (
        "project 59 bytes\n"
        "├─ tests 28 bytes\n"
        "│  └─ test_main.py 28 bytes\n"
        "├─ src 16 bytes\n"
        "│  └─ main.py 16 bytes\n"
        "└─ README.md 15 bytes\n"
    )


def test_cli_renders_single_file(sample_project: Path, isolated_user_dir: Path) -> None:
    result = run_cli([str(sample_project / "README.md")], isolated_user_dir)

    assert result.returncode == 0, result.stderr
    assert result.stdout == "README.md 15 bytes\n"


def test_cli_missing_path(tmp_path: Path, isolated_user_dir: Path) -> None:
    result = run_cli([str(tmp_path / "nowhere")], isolated_user_dir)

    assert result.returncode == 2
    assert result.stdout == ""
    assert "Path does not exist" in result.stderr


def test_cli_saves_output_file(sample_project: Path, tmp_path: Path, isolated_user_dir: Path) -> None:
    out_file = tmp_path / "out" / "tree.txt"

    result = run_cli([str(sample_project), "--output", str(out_file)], isolated_user_dir)

    assert result.returncode == 0, result.stderr
    assert out_file.read_bytes().decode("utf-8") == result.stdout


def test_cli_relative_path(sample_project: Path, isolated_user_dir: Path) -> None:
    result = run_cli(["src"], isolated_user_dir, cwd=sample_project)

    assert result.returncode == 0, result.stderr
    assert result.stdout == "src 16 bytes\n└─ main.py 16 bytes\n"
