"""Named test steps, so a failing scenario reports which step broke."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def step(title: str) -> Generator[None, None, None]:
    """
    Wrap a block of a scenario under a readable label.

    The label is logged when the step starts and finishes. When the block
    raises an error, the failure is logged and the error is re-raised with
    the step title attached as a note. Skips and interrupts pass through
    untouched.

    Example:
        with step("Create 1st todo."):
            todo_page.create_a_todo_item("buy some cheese")
    """
    logger.info("Step: %s", title)
    started = time.time()
    try:
        yield
    except Exception as exc:
        logger.error("Step failed: %s (%s)", title, type(exc).__name__)
        if hasattr(exc, "add_note"):
            exc.add_note(f"Failed step: {title}")
        raise
    logger.info("Step passed: %s (%.2fs)", title, time.time() - started)
