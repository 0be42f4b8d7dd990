from __future__ import annotations

"""
Tree Viewer Controller.

Bridges the viewer widgets and the analysis layer: reads the requested
path from the view, renders it, and pushes the report and a status
message back. Holds no widget construction logic, so it can be driven
with mocked views.
"""

import logging
import os
from typing import Any, Dict, Optional

from bytetree.core.analysis.tree_generator import render_tree
from bytetree.domain import config as cfg
from bytetree.infra.fs import normalize_path
from bytetree.utils.i18n import i18n

logger = logging.getLogger(__name__)


class TreeController:
    """
    Controller for the single-window tree viewer.

    Attributes:
        app: Root window, used for clipboard access.
        config: Active configuration dictionary, updated after each render.
        view: Registered viewer frame exposing entry_path, textbox and
            lbl_status widgets.
    """

    def __init__(self, app: Any, config: Dict[str, Any]):
        self.app = app
        self.config = config
        self.view: Any = None
        self.last_report: Optional[str] = None

    def register_view(self, view: Any) -> None:
        self.view = view

    def sync_view_from_config(self) -> None:
        """Pre-fill the path entry with the last rendered path."""
        if not self.view:
            return
        self.view.entry_path.delete(0, "end")
        self.view.entry_path.insert(0, self.config.get("last_path", ""))

    def set_path(self, path: str) -> None:
        """Replace the path entry content (used by the browse dialog)."""
        if not self.view or not path:
            return
        self.view.entry_path.delete(0, "end")
        self.view.entry_path.insert(0, path)

    def render_current(self) -> Optional[str]:
        """
        Render the path currently typed in the view.

        Returns:
            Optional[str]: The report shown, or None if nothing was found.
        """
        if not self.view:
            return None

        raw_path = self.view.entry_path.get().strip()
        report = render_tree(raw_path) if raw_path else None

        if report is None:
            logger.warning(f"GUI: Nothing to render at '{raw_path}'")
            self.last_report = None
            self._show_text("")
            self._set_status(i18n.t("gui.status.not_found", default="Nothing found at: {path}", path=raw_path))
            return None

        self.last_report = report
        self._show_text(report)
        self._set_status(i18n.t("gui.status.rendered", default="Rendered {lines} lines.", lines=len(report.splitlines())))

        self.config["last_path"] = normalize_path(raw_path, os.getcwd())
        cfg.save_config(self.config)
        return report

    def copy_to_clipboard(self) -> None:
        """Copy the last rendered report to the system clipboard."""
        if not self.last_report:
            return
        self.app.clipboard_clear()
        self.app.clipboard_append(self.last_report)
        self._set_status(i18n.t("gui.status.copied", default="Tree copied to clipboard."))

    # -------------------------------------------------------------------------
    # VIEW HELPERS
    # -------------------------------------------------------------------------

    def _show_text(self, text: str) -> None:
        textbox = self.view.textbox
        textbox.configure(state="normal")
        textbox.delete("1.0", "end")
        textbox.insert("1.0", text)
        textbox.configure(state="disabled")

    def _set_status(self, message: str) -> None:
        self.view.lbl_status.configure(text=message)
