from __future__ import annotations

"""
Directory Tree Generator.

Public entry point of the analysis layer. Orchestrates building the node
model for a path, rendering it, and the optional preview and persistence
of the resulting report.
"""

import logging
from typing import List, Optional

from bytetree.core.analysis.tree_builder import build_node, normalize_root
from bytetree.core.analysis.tree_renderer import format_entry, render_node_lines
from bytetree.domain.constants import NEW_LINE
from bytetree.domain.tree_models import DirectoryNode, FileNode, RenderContext
from bytetree.infra.fs import PathLike, save_text

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(path: Optional[PathLike]) -> Optional[str]:
    """
    Render the tree report for a file or directory.

    A file yields '<name> <size> bytes' without a trailing newline. A
    directory yields its header followed by one line per descendant, every
    line terminated by a newline. Filesystem failures below the root
    degrade to zero sizes or empty listings.

    Args:
        path: File or directory to render, absolute or relative.

    Returns:
        Optional[str]: The rendered report, or None if the path is missing
        or is neither a regular file nor a directory.
    """
    if path is None or not str(path):
        return None

    root_path = normalize_root(path)
    node = build_node(root_path)

    if isinstance(node, FileNode):
        return format_entry(node.name, node.size)

    if isinstance(node, DirectoryNode):
        lines: List[str] = [format_entry(node.name, node.size)]
        lines.extend(render_node_lines(node, RenderContext(root_path=root_path)))
        return "".join(line + NEW_LINE for line in lines)

    return None


def generate_tree_report(
        path: Optional[PathLike],
        print_to_log: bool = False,
        save_path: str = "",
) -> Optional[str]:
    """
    Render a tree report with optional logging and persistence.

    Args:
        path: File or directory to render.
        print_to_log: Whether to log the output at INFO.
        save_path: Optional file path to persist the report.

    Returns:
        Optional[str]: The rendered report, or None if nothing was found.
    """
    logger.info(f"Generating tree report for: {path}")

    report = render_tree(path)
    if report is None:
        logger.warning(f"No file or directory found at: {path}")
        return None

    if print_to_log:
        logger.info("Tree Preview:\n" + report)

    if save_path:
        _save_report_to_disk(save_path, report)

    return report

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _save_report_to_disk(save_path: str, report: str) -> None:
    """Persist the report verbatim, logging instead of raising on failure."""
    ok, error = save_text(save_path, report)
    if ok:
        logger.info(f"Tree saved to file: {save_path}")
    else:
        logger.error(f"Failed to save tree to '{save_path}': {error}")
