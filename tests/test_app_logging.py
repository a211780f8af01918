"""Tests for logging configuration."""

import logging
from dataclasses import replace

import pytest

from babyfeed.api.app import create_app
from babyfeed.app_logging import configure_logging, resolve_level
from babyfeed.containers import AppContainer


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("babyfeed")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_sets_level() -> None:
    logger = logging.getLogger("babyfeed")
    logger.handlers.clear()

    configure_logging(logging.DEBUG)

    assert logger.level == logging.DEBUG
    assert logger.propagate is False


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (logging.WARNING, logging.WARNING),
        ("debug", logging.DEBUG),
        (" Error ", logging.ERROR),
        ("chatty", logging.INFO),
    ],
)
def test_resolve_level(level, expected) -> None:
    assert resolve_level(level) == expected


def test_create_app_uses_configured_level(
    container: AppContainer, request: pytest.FixtureRequest
) -> None:
    logger = logging.getLogger("babyfeed")
    request.addfinalizer(lambda level=logger.level: logger.setLevel(level))
    logger.handlers.clear()
    settings = container.settings.model_copy(update={"log_level": "warning"})

    create_app(replace(container, settings=settings))

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
