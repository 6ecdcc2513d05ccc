"""Mini README: Tests for the root logger helpers.

Importing any module installs the root handler at INFO; entry points must
still be able to raise or lower the level afterwards.
"""

from __future__ import annotations

import logging

import pytest

from pocketledger.logging_utils import configure_root_logger, get_logger, level_for_environment


@pytest.fixture(autouse=True)
def restore_root_level():
    root_logger = logging.getLogger()
    original = root_logger.level
    yield
    root_logger.setLevel(original)


def test_explicit_level_applies_after_handler_is_installed() -> None:
    get_logger("pocketledger.tests")
    handlers = list(logging.getLogger().handlers)

    configure_root_logger(level_for_environment("development"))
    assert logging.getLogger().level == logging.DEBUG

    configure_root_logger(level_for_environment("production"))
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger().handlers == handlers


def test_implicit_configuration_keeps_explicit_level() -> None:
    configure_root_logger(logging.WARNING)
    get_logger("pocketledger.tests")

    assert logging.getLogger().level == logging.WARNING


def test_level_for_environment_is_case_insensitive() -> None:
    assert level_for_environment("Production") == logging.INFO
    assert level_for_environment("staging") == logging.DEBUG
