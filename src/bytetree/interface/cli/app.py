from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading
and merging with command-line overrides, tree rendering, and writing the
report to standard output.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from bytetree.core.analysis.tree_generator import generate_tree_report
from bytetree.domain import config as cfg
from bytetree.infra.fs import normalize_path
from bytetree.infra.logging import LoggingConfig, configure_logging, get_logger
from bytetree.interface.cli import args as cli_args
from bytetree.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 missing path,
        130 interrupted).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Configuration hierarchy (defaults or stored state, then CLI overrides)
    base_conf = cfg.get_default_config() if args.use_defaults else cfg.load_config()
    conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    # 2. Logging bootstrap (console on stderr, optional file)
    configure_logging(LoggingConfig(level=conf["log_level"], console=True, log_file=args.log_file))
    logger.debug("CLI execution initiated.")

    if args.dump_config:
        _write_report(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 3. Pre-flight input verification
    target = conf["last_path"]
    if not target or not os.path.exists(target):
        msg = i18n.t("cli.errors.path_not_exist", path=target)
        logger.error(msg)
        return EXIT_NOT_FOUND

    # 4. Rendering
    try:
        report = generate_tree_report(
            target,
            print_to_log=args.preview_log,
            save_path=conf["save_path"],
        )
    except KeyboardInterrupt:
        logger.warning(i18n.t("cli.status.interrupted"))
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(i18n.t("cli.errors.render_fail", error=str(e)), exc_info=True)
        return EXIT_FAILURE

    if report is None:
        logger.error(i18n.t("cli.errors.path_not_exist", path=target))
        return EXIT_NOT_FOUND

    _write_report(report)

    # 5. Remember the rendered path for the next run
    if not args.use_defaults:
        base_conf["last_path"] = normalize_path(target, os.getcwd())
        cfg.save_config(base_conf)

    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-empty override keys into the base configuration."""
    out = dict(base)
    for k in ("last_path", "save_path", "log_level"):
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out


def _write_report(report: str) -> None:
    """
    Write a report to stdout, terminated by exactly one newline.

    Characters the stream cannot encode, including names decoded from
    undecodable filesystem bytes, are written as backslash escapes.
    """
    text = report if report.endswith("\n") else report + "\n"
    try:
        sys.stdout.write(text)
    except UnicodeEncodeError:
        encoding = sys.stdout.encoding or "utf-8"
        sys.stdout.write(text.encode(encoding, errors="backslashreplace").decode(encoding))
    sys.stdout.flush()


if __name__ == "__main__":
    sys.exit(main())
