from __future__ import annotations

import logging

from powerset.generator import generate
from powerset.logging import get_logger, set_global_log_level


def test_set_global_log_level_and_get_logger_smoke(caplog) -> None:
    set_global_log_level(logging.WARNING)
    lg = get_logger("powerset.smoke")
    assert lg.isEnabledFor(logging.WARNING)
    assert not lg.isEnabledFor(logging.INFO)

    caplog.set_level(logging.DEBUG, logger="powerset.smoke")
    lg.debug("debug message")
    assert any(
        r.levelno == logging.DEBUG and r.name == "powerset.smoke"
        for r in caplog.records
    )


def test_generator_debug_logging_smoke(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="powerset.generator")

    generate([1, 2, 3])

    assert any(
        r.levelno == logging.DEBUG
        and r.name == "powerset.generator"
        and "Generated 8 subsets" in r.getMessage()
        for r in caplog.records
    )
