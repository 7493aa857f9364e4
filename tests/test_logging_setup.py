from __future__ import annotations

import logging

from greeting_service.common.logging_setup import setup_logging


def test_level_name_is_accepted() -> None:
    setup_logging("debug")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1


def test_unknown_level_name_falls_back_to_info() -> None:
    setup_logging("chatty")
    assert logging.getLogger().level == logging.INFO
