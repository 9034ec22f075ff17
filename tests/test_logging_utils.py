"""Mini README: Tests for the logging helpers.

Level names from configuration map onto the root logger; unknown names fail
loudly instead of silently logging at the wrong level.
"""

from __future__ import annotations

import logging

import pytest

from budgetboard.logging_utils import LOG_FORMAT, get_logger, set_log_level


@pytest.fixture()
def restore_root_level():
    root = logging.getLogger()
    previous = root.level
    yield root
    root.setLevel(previous)


def test_set_log_level_accepts_names(restore_root_level: logging.Logger) -> None:
    set_log_level("debug")
    assert restore_root_level.level == logging.DEBUG

    set_log_level(" Warning ")
    assert restore_root_level.level == logging.WARNING

    set_log_level(logging.ERROR)
    assert restore_root_level.level == logging.ERROR


def test_set_log_level_rejects_unknown_names(restore_root_level: logging.Logger) -> None:
    with pytest.raises(ValueError):
        set_log_level("chatty")


def test_get_logger_installs_single_handler() -> None:
    get_logger("budgetboard.one")
    get_logger("budgetboard.two")

    formats = [
        handler.formatter._fmt
        for handler in logging.getLogger().handlers
        if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT
    ]
    assert len(formats) == 1
    assert get_logger("budgetboard.one").name == "budgetboard.one"
