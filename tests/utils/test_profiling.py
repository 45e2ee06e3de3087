"""Unit tests for the timing decorator."""

import pytest
from loguru import logger

from cl_thumbnail_tools import render_thumbnail
from cl_thumbnail_tools.utils.profiling import timed


@pytest.fixture
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="INFO", format="{message}")
    yield messages
    logger.remove(handler_id)


def test_timed_logs_sync_call(log_messages: list[str]):
    """Test a decorated function logs its duration and returns its result."""

    @timed
    def double(value: int) -> int:
        return value * 2

    assert double(21) == 42
    assert any("[PROFILE]" in message and "double" in message for message in log_messages)


def test_timed_logs_on_error(log_messages: list[str]):
    """Test the duration is logged even when the call raises."""

    @timed
    def explode() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        explode()

    assert any("explode" in message for message in log_messages)


@pytest.mark.asyncio
async def test_timed_logs_async_call(log_messages: list[str]):
    """Test coroutine functions are awaited and timed."""

    @timed
    async def fetch() -> str:
        return "done"

    assert await fetch() == "done"
    assert any("fetch" in message for message in log_messages)


def test_render_thumbnail_is_timed(log_messages: list[str], gradient_image):
    """Test thumbnail renders are profiled."""
    _ = render_thumbnail(gradient_image(100, 50), 64)

    assert any("render_thumbnail took" in message for message in log_messages)


def test_timed_with_label_and_level():
    """Test a custom label and log level are honoured."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")

    @timed(label="band loop", level="DEBUG")
    def work() -> int:
        return 7

    try:
        assert work() == 7
    finally:
        logger.remove(handler_id)

    assert any(message.startswith("DEBUG [PROFILE] band loop took") for message in messages)
    assert work.__name__ == "work"
