from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
level parsing and log file rotation.
"""

import logging
import time
from logging.handlers import QueueHandler
from pathlib import Path

from bytetree.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    parse_level,
    shutdown_logging,
)
from bytetree.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR
from bytetree.infra.logging.handlers import _HANDLER_TAG_ATTR


def _our_handlers() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """Repeated configuration must not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial_count = len(_our_handlers())
    configure_logging(cfg)

    assert initial_count == 1
    assert len(_our_handlers()) == initial_count


def test_force_reconfiguration_replaces_listener() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    root = logging.getLogger()
    first_listener = getattr(root, _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert getattr(root, _QUEUE_LISTENER_ATTR) is not first_listener
    assert root.level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    handlers = _our_handlers()

    assert len(handlers) == 1
    assert isinstance(handlers[0], QueueHandler)
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_file_logging_written(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "bytetree.log"
    configure_logging(LoggingConfig(level="INFO", console=False, log_file=str(log_file)))

    logging.getLogger("bytetree.test").info("persisted message")
    shutdown_logging()

    assert "persisted message" in log_file.read_text(encoding="utf-8")


def test_log_rotation(tmp_path: Path) -> None:
    log_file = tmp_path / "rotate.log"
    configure_logging(LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    ))

    logger = logging.getLogger("bytetree.rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    time.sleep(0.2)
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "rotate.log.1").exists()


def test_no_handlers_requested_leaves_root_unconfigured() -> None:
    root = configure_logging(LoggingConfig(console=False, log_file=None))

    assert _our_handlers() == []
    assert not getattr(root, _CONFIGURED_FLAG_ATTR, False)


def test_shutdown_is_repeatable() -> None:
    configure_logging(LoggingConfig(level="INFO"))

    shutdown_logging()
    shutdown_logging()

    assert _our_handlers() == []


def test_parse_level() -> None:
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" warn ") == logging.WARNING
    assert parse_level("nonsense") == logging.INFO
    assert parse_level(None) == logging.INFO


def test_default_log_path_in_user_data_dir(isolated_user_dir: Path) -> None:
    path = get_default_log_path()

    assert path.startswith(str(isolated_user_dir))
    assert path.endswith("bytetree.log")
