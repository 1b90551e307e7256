from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from utils.logger import QUIET_LOGGERS, setup_logging


def test_setup_logging_installs_rich_handler_at_level():
    level = setup_logging("debug", Console(quiet=True))

    assert level == logging.DEBUG
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in root.handlers)
    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    assert setup_logging("chatty", Console(quiet=True)) == logging.INFO


def test_quiet_loggers_follow_a_stricter_level():
    setup_logging("ERROR", Console(quiet=True))

    assert logging.getLogger("aiohttp.access").level == logging.ERROR
