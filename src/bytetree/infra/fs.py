from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path resolution, entry classification and the line-oriented
size reader used by the tree builder. Every filesystem failure is turned
into an explicit empty value at this boundary, so callers never handle
OSError themselves.
"""

import logging
import os
from typing import List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "ByteTree"
UNIX_APP_DIR_NAME = ".bytetree"

KIND_FILE = "file"
KIND_DIR = "dir"
KIND_LINK = "link"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/ByteTree
    - Linux/Mac: ~/.bytetree

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Unable to create user data dir '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def base_name(path: str) -> str:
    """Return the last segment of a path, keeping '.' and '..' as given."""
    name = os.path.basename(os.path.normpath(path))
    return name or path

# -----------------------------------------------------------------------------
# ENTRY INSPECTION API
# -----------------------------------------------------------------------------

def classify_path(path: PathLike, follow_dir_links: bool = False) -> Optional[str]:
    """
    Identify whether a path is a regular file or a directory.

    Links to files resolve to the file. Links to directories are reported
    as KIND_LINK unless following them is requested, so a walk can list
    them without entering a link cycle.

    Args:
        path: Path to inspect.
        follow_dir_links: Report a link to a directory as KIND_DIR.

    Returns:
        Optional[str]: KIND_FILE, KIND_DIR, KIND_LINK or None for anything else
        (missing entries, broken links, sockets, devices).
    """
    try:
        if os.path.isfile(path):
            return KIND_FILE
        if os.path.isdir(path):
            if os.path.islink(path) and not follow_dir_links:
                return KIND_LINK
            return KIND_DIR
    except (OSError, ValueError) as e:
        logger.debug(f"Unable to inspect '{path}': {e}")
    return None


def list_directory(path: str) -> List[str]:
    """
    List the full paths of a directory's immediate children.

    Returns:
        List[str]: Child paths in listing order, or an empty list when the
        directory cannot be read.
    """
    try:
        names = os.listdir(path)
    except OSError as e:
        logger.debug(f"Unable to list directory '{path}': {e}")
        return []
    return [os.path.join(path, name) for name in names]


def read_first_line_length(path: str) -> int:
    """
    Measure the character length of the first line of a text file.

    Line terminators are not counted. Undecodable bytes count as one
    replacement character each.

    Returns:
        int: Length of the first line, 0 for empty or unreadable files.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            line = f.readline()
    except (OSError, ValueError) as e:
        logger.debug(f"Unable to read '{path}': {e}")
        return 0
    return len(line.rstrip("\n"))

# -----------------------------------------------------------------------------
# PERSISTENCE API
# -----------------------------------------------------------------------------

def save_text(path: str, text: str) -> Tuple[bool, Optional[str]]:
    """
    Write text to a file, creating the parent hierarchy when needed.

    Names decoded from undecodable filesystem bytes are written back as
    their original bytes.

    Args:
        path: Destination file path.
        text: Content to write verbatim.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        out_dir = os.path.dirname(os.path.abspath(path))
        os.makedirs(out_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(text)
        return True, None
    except (OSError, ValueError) as e:
        return False, str(e)
