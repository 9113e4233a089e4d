"""Poll-until-condition helper used by every non-DOM verification."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def wait_until(
    probe: Callable[[], T],
    predicate: Callable[[T], bool],
    *,
    timeout: float = 5.0,
    interval: float = 0.1,
    description: str = "condition",
) -> T:
    """
    Call ``probe`` until ``predicate`` accepts its result or time runs out.

    The probe is always called at least once, even with a zero timeout.

    Args:
        probe: Zero-argument callable returning the observed value.
        predicate: Returns True when the observed value is acceptable.
        timeout: Maximum wait time in seconds.
        interval: Sleep between attempts in seconds.
        description: Human readable expectation used in the failure message.

    Returns:
        The first observed value accepted by ``predicate``.

    Raises:
        AssertionError: The condition never held within ``timeout``.
    """
    deadline = time.time() + timeout
    attempts = 0
    while True:
        observed = probe()
        attempts += 1
        if predicate(observed):
            return observed
        logger.debug("Waiting for %s (attempt %d): observed %r", description, attempts, observed)
        if time.time() >= deadline:
            break
        time.sleep(interval)

    raise AssertionError(
        f"Timed out after {timeout}s waiting for {description}; last observed: {observed!r}"
    )
