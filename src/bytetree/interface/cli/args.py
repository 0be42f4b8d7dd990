from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed namespaces into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from bytetree.domain.constants import APP_VERSION
from bytetree.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the ByteTree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="bytetree",
        description=i18n.t("app.description"),
    )

    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.path"),
    )
    p.add_argument(
        "-o", "--output",
        dest="save_path",
        default=None,
        help=i18n.t("cli.args.output"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--preview-log",
        dest="preview_log",
        action="store_true",
        help=i18n.t("cli.args.preview_log", default="Also write the rendered tree to the log at INFO."),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually supplied are returned.
    """
    overrides: Dict[str, Any] = {}

    if args.path:
        overrides["last_path"] = args.path
    if args.save_path:
        overrides["save_path"] = args.save_path
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
