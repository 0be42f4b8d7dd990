from __future__ import annotations

"""
Tree Renderer.

Converts the node model into connector-style text lines. Each directory
is emitted in two passes over its sorted children: subdirectories first
(each followed by its expanded content), then files.
"""

from typing import Iterator, List, Tuple

from bytetree.domain.constants import BRANCH, INDENT_UNIT, LAST_BRANCH, SIZE_UNIT
from bytetree.domain.tree_models import DirectoryNode, RenderContext, TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_entry(name: str, size: int) -> str:
    """Compose the '<name> <size> bytes' label shared by every line."""
    return f"{name} {size} {SIZE_UNIT}"


def render_node_lines(directory: DirectoryNode, context: RenderContext) -> List[str]:
    """
    Render every descendant of a directory as indented connector lines.

    The directory's own header is not included.

    Args:
        directory: Expanded directory whose children are rendered.
        context: Rendering context anchored at the traversal root.

    Returns:
        List[str]: One line per descendant, without line terminators.
    """
    lines: List[str] = []
    stack: List[Tuple[DirectoryNode, Iterator[TreeNode]]] = [(directory, _emission_order(directory))]

    while stack:
        parent, pending = stack[-1]
        node = next(pending, None)
        if node is None:
            stack.pop()
            continue

        lines.append(_entry_line(parent, node, context))
        if isinstance(node, DirectoryNode):
            stack.append((node, _emission_order(node)))

    return lines

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _emission_order(directory: DirectoryNode) -> Iterator[TreeNode]:
    # Pass 1: subdirectories, pass 2: files
    return iter(directory.directories + directory.files)


def _entry_line(parent: DirectoryNode, node: TreeNode, context: RenderContext) -> str:
    connector = LAST_BRANCH if parent.is_last(node) else BRANCH
    indent = INDENT_UNIT * context.depth_of(node.path)
    return f"{indent}{connector}{format_entry(node.name, node.size)}"
