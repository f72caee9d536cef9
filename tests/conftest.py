from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    logger.remove()
    logger.disable("bytes_converter")


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    logger.enable("bytes_converter")
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
