"""Playwright fixtures for the TodoMVC E2E tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, expect

from config import Config, get_config
from shared.live_app import resolve_app_url
from tests.e2e.pages.todo_page import TodoPage

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def settings() -> type[Config]:
    """Configuration for the active TEST_ENV."""
    return get_config()


@pytest.fixture(scope="session")
def todo_app_url(settings: type[Config]) -> str:
    """
    Return the URL of the TodoMVC application under test.

    An explicit TODO_APP_URL that cannot be reached fails the tests; the
    suite is skipped only when the default public demo is unreachable.
    """
    return resolve_app_url(
        url_env=settings.APP_URL_ENV,
        default_url=settings.DEMO_APP_URL,
        timeout=settings.REACHABILITY_TIMEOUT_S,
    )


@pytest.fixture(scope="session", autouse=True)
def expect_timeout(settings: type[Config]) -> None:
    """Apply the configured retry window to every Playwright assertion."""
    expect.set_options(timeout=settings.EXPECT_TIMEOUT_MS)


@pytest.fixture(scope="session")
def browser_context_args(settings: type[Config]):
    return {
        "viewport": settings.VIEWPORT,
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    """
    Create a fresh browser context for each test.

    A new context starts with empty localStorage, so todos saved by one
    test are never visible to the next.
    """
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext, settings: type[Config]) -> Generator[Page, None, None]:
    page = context.new_page()
    page.set_default_timeout(settings.EXPECT_TIMEOUT_MS)
    yield page
    page.close()


@pytest.fixture
def todo_page(page: Page, todo_app_url: str, settings: type[Config]) -> Generator[TodoPage, None, None]:
    """TodoPage bound to this test's page, already navigated to the app."""
    todo = TodoPage(page, todo_app_url, settings)
    todo.navigate()
    yield todo


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            test_name = item.name.replace("/", "_").replace("::", "_")
            try:
                screenshot_path = TodoPage(page, "").take_screenshot(test_name)
                logger.info("Screenshot saved: %s", screenshot_path)
            except Exception as exc:  # pragma: no cover - best effort logging
                logger.warning("Failed to capture screenshot: %s", exc)
