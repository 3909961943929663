import logging

import pytest
from billzy.runtime import get_logger
from billzy.runtime.logging import DEFAULT_LOG_LEVEL, level_from_env


@pytest.mark.parametrize(
    ("value", "level"),
    [
        ("debug", logging.DEBUG),
        (" INFO ", logging.INFO),
        ("warn", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("", DEFAULT_LOG_LEVEL),
        ("loud", DEFAULT_LOG_LEVEL),
    ],
)
def test_level_from_env(value: str, level: int) -> None:
    assert level_from_env(value) == level


def test_level_from_env_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BILLZY_LOG_LEVEL", "debug")

    assert level_from_env() == logging.DEBUG


def test_loggers_live_under_billzy_namespace() -> None:
    assert get_logger("billzy.receipt.ocr_result_parser").name == "billzy.receipt.ocr_result_parser"
    assert get_logger("scripts.tool").name == "billzy.scripts.tool"
    assert logging.getLogger("billzy").propagate is False
