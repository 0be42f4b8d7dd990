from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the node types produced by a single traversal and the transient
context carried through a rendering pass.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (regular file) in the directory tree.

    Attributes:
        name: Base name of the file.
        path: Filesystem path of the file.
        size: Character length of the first line of text (0 if none).
    """
    name: str
    path: str
    size: int = 0


@dataclass
class DirectoryNode:
    """
    Represents a directory and its expanded descendants.

    Attributes:
        name: Base name of the directory.
        path: Filesystem path of the directory.
        size: Sum of the sizes of every file beneath this directory.
        children: Renderable children in descending case-insensitive order.
        last_entry_path: Path of the final entry of the full sibling listing,
            which may be an entry that is not rendered at all.
    """
    name: str
    path: str
    size: int = 0
    children: List["TreeNode"] = field(default_factory=list)
    last_entry_path: Optional[str] = None

    @property
    def directories(self) -> List["DirectoryNode"]:
        return [c for c in self.children if isinstance(c, DirectoryNode)]

    @property
    def files(self) -> List[FileNode]:
        return [c for c in self.children if isinstance(c, FileNode)]

    def is_last(self, node: "TreeNode") -> bool:
        """Check whether a child closes this directory's sibling listing."""
        return node.path == self.last_entry_path


TreeNode = Union[FileNode, DirectoryNode]


# -----------------------------------------------------------------------------
# RENDERING CONTEXT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderContext:
    """
    Immutable state carried through one rendering pass.

    Attributes:
        root_path: Normalized path of the traversal root.
    """
    root_path: str

    def depth_of(self, path: str) -> int:
        """
        Compute the indentation depth of an entry relative to the root.

        Direct children of the root have depth 0.
        """
        relative = os.path.relpath(path, self.root_path)
        return len(relative.split(os.sep)) - 1
