"""Reachability helpers for the application under test."""

from __future__ import annotations

import logging
import os
import time

import pytest
import requests

logger = logging.getLogger(__name__)


class AppUnreachableError(RuntimeError):
    """Raised when the application URL does not answer before the deadline."""


def is_app_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when ``url`` answers with a non-error status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.debug("GET %s failed: %s", url, exc)
        return False
    return response.status_code < 400


def wait_for_app_reachable(url: str, timeout: int = 10, interval: int = 1) -> str:
    """
    Poll the application URL until it answers or timeout.

    Args:
        url: Application URL.
        timeout: Maximum wait time in seconds.
        interval: Sleep between attempts in seconds.

    Returns:
        The URL, once reachable.

    Raises:
        AppUnreachableError: The URL never answered within ``timeout``.
    """
    deadline = time.time() + timeout
    while True:
        if is_app_reachable(url):
            return url
        if time.time() >= deadline:
            break
        time.sleep(interval)
    logger.warning("Application at %s not reachable after %ss", url, timeout)
    raise AppUnreachableError(f"Application at {url} not reachable after {timeout}s")


def resolve_app_url(*, url_env: str, default_url: str, timeout: int = 10) -> str:
    """
    Return a reachable application URL.

    Priority:
    1. Use the explicit URL from ``url_env``. If it does not answer,
       AppUnreachableError propagates and the tests using it fail.
    2. Fall back to ``default_url``. If it does not answer (typically no
       network access), skip instead of failing.
    """
    provided_url = os.getenv(url_env)
    if provided_url:
        return wait_for_app_reachable(provided_url, timeout=timeout)

    try:
        return wait_for_app_reachable(default_url, timeout=timeout)
    except AppUnreachableError as exc:
        pytest.skip(f"{exc}; set {url_env} to run E2E tests against another deployment")
