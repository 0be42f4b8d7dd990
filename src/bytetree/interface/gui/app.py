from __future__ import annotations

"""
GUI Entrypoint.

Builds the CustomTkinter viewer window: a path entry with a browse
button, a render button, a read-only monospaced textbox for the report
and a status line. Events are routed to the TreeController.
"""

import logging
from tkinter import filedialog
from typing import Any

import customtkinter as ctk

from bytetree.domain import config as cfg
from bytetree.domain import constants as const
from bytetree.infra.logging import LoggingConfig, configure_logging, get_default_log_path
from bytetree.interface.gui.controllers.tree_controller import TreeController
from bytetree.utils.i18n import i18n

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# VIEW
# -----------------------------------------------------------------------------

class TreeViewFrame(ctk.CTkFrame):
    """Main viewer frame holding every interactive widget."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(self, text=i18n.t("gui.labels.path")).grid(row=0, column=0, padx=(0, 10))

        self.entry_path = ctk.CTkEntry(self)
        self.entry_path.grid(row=0, column=1, sticky="ew")

        self.btn_browse = ctk.CTkButton(self, text=i18n.t("gui.buttons.browse"), width=100)
        self.btn_browse.grid(row=0, column=2, padx=(10, 0))

        self.btn_render = ctk.CTkButton(self, text=i18n.t("gui.buttons.render"), width=100)
        self.btn_render.grid(row=0, column=3, padx=(10, 0))

        self.textbox = ctk.CTkTextbox(self, state="disabled", font=("Consolas", 12), wrap="none")
        self.textbox.grid(row=1, column=0, columnspan=4, sticky="nsew", pady=10)

        self.lbl_status = ctk.CTkLabel(self, text=i18n.t("gui.status.ready"), anchor="w")
        self.lbl_status.grid(row=2, column=0, columnspan=3, sticky="ew")

        self.btn_copy = ctk.CTkButton(self, text=i18n.t("gui.buttons.copy"), width=100)
        self.btn_copy.grid(row=2, column=3, padx=(10, 0))


# -----------------------------------------------------------------------------
# MAIN APPLICATION LOOP
# -----------------------------------------------------------------------------

def main() -> None:
    """Initialize logging and configuration, build the window and enter the loop."""
    config = cfg.load_config()
    configure_logging(
        LoggingConfig(level=config["log_level"], console=True, log_file=get_default_log_path())
    )
    logger.info(f"GUI Lifecycle: Initializing v{const.APP_VERSION}")

    ctk.set_appearance_mode("System")
    app = ctk.CTk()
    app.title(i18n.t("app.title"))
    app.geometry("900x600")
    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=1)

    view = TreeViewFrame(app)
    view.grid(row=0, column=0, sticky="nsew", padx=20, pady=20)

    controller = TreeController(app, config)
    controller.register_view(view)
    controller.sync_view_from_config()

    view.btn_render.configure(command=controller.render_current)
    view.btn_copy.configure(command=controller.copy_to_clipboard)
    view.btn_browse.configure(command=lambda: _browse_folder(view, controller))
    view.entry_path.bind("<Return>", lambda _event: controller.render_current())

    app.mainloop()


def _browse_folder(view: TreeViewFrame, controller: TreeController) -> None:
    """Open a directory picker seeded with the current entry value."""
    selected = filedialog.askdirectory(initialdir=view.entry_path.get() or None)
    if selected:
        controller.set_path(selected)
        controller.render_current()
