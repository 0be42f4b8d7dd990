from __future__ import annotations

"""
Directory Tree Builder.

Walks the filesystem depth-first from a root path and produces the node
model consumed by the renderer. Sizes are aggregated bottom-up as each
directory is closed, so each file is read exactly once.
"""

import logging
import os
from typing import Iterator, List, Optional, Tuple

from bytetree.domain.tree_models import DirectoryNode, FileNode, TreeNode
from bytetree.infra.fs import (
    KIND_DIR,
    KIND_FILE,
    KIND_LINK,
    PathLike,
    base_name,
    classify_path,
    list_directory,
    read_first_line_length,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_node(path: str) -> Optional[TreeNode]:
    """
    Build the node model for a root path.

    Args:
        path: Root of the traversal. A link to a directory is followed
            at the root level only.

    Returns:
        Optional[TreeNode]: A FileNode, a fully expanded DirectoryNode, or
        None if the path is missing or is neither a file nor a directory.
    """
    kind = classify_path(path, follow_dir_links=True)
    if kind == KIND_FILE:
        return _build_file(path)
    if kind == KIND_DIR:
        return _build_directory(path)
    logger.debug(f"Nothing to render at '{path}'")
    return None


def normalize_root(path: PathLike) -> str:
    """Convert a caller-supplied root into a normalized path string."""
    return os.path.normpath(os.fspath(path))


def sort_entries(paths: List[str]) -> List[str]:
    """
    Order sibling paths case-insensitively in descending order.

    Paths equal under case folding fall back to the exact string, also
    descending, so the order never depends on the OS listing order.
    """
    return sorted(paths, key=lambda p: (p.lower(), p), reverse=True)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_file(path: str) -> FileNode:
    return FileNode(name=base_name(path), path=path, size=read_first_line_length(path))


def _build_directory(path: str) -> DirectoryNode:
    """
    Expand a directory into nodes and total its size.

    The walk keeps an explicit stack of open directories, so nesting depth
    is not bounded by the interpreter's recursion limit. A directory's size
    is added to its parent when its listing is exhausted.
    """
    root = DirectoryNode(name=base_name(path), path=path)
    stack: List[Tuple[DirectoryNode, Iterator[str]]] = [(root, _open_listing(root))]

    while stack:
        node, entries = stack[-1]
        entry = next(entries, None)

        if entry is None:
            stack.pop()
            if stack:
                stack[-1][0].size += node.size
            continue

        kind = classify_path(entry)
        if kind == KIND_DIR:
            sub = DirectoryNode(name=base_name(entry), path=entry)
            node.children.append(sub)
            stack.append((sub, _open_listing(sub)))
        elif kind == KIND_LINK:
            # Listed as an empty directory, never expanded
            node.children.append(DirectoryNode(name=base_name(entry), path=entry))
        elif kind == KIND_FILE:
            file_node = _build_file(entry)
            node.children.append(file_node)
            node.size += file_node.size
        else:
            logger.debug(f"Skipping unsupported entry '{entry}'")

    return root


def _open_listing(node: DirectoryNode) -> Iterator[str]:
    """Sort a directory's entries, record the closing one and iterate them."""
    entries = sort_entries(list_directory(node.path))
    if entries:
        node.last_entry_path = entries[-1]
    return iter(entries)
