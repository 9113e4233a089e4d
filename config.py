"""
Test suite configuration module.

This module defines configuration classes for the environments the
end-to-end suite runs in (local, ci). Configuration values are loaded
from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    # Public demo used when TODO_APP_URL is not set
    DEMO_APP_URL: str = "https://demo.playwright.dev/todomvc"
    APP_URL_ENV: str = "TODO_APP_URL"
    APP_URL: str = os.environ.get(APP_URL_ENV, DEMO_APP_URL)

    # localStorage key the TodoMVC application persists its list under
    STORAGE_KEY: str = os.environ.get("TODO_STORAGE_KEY", "react-todos")

    EXPECT_TIMEOUT_MS: int = int(os.environ.get("EXPECT_TIMEOUT_MS", "5000"))
    POLL_INTERVAL_S: float = 0.1
    REACHABILITY_TIMEOUT_S: int = 10

    VIEWPORT: dict = {"width": 1280, "height": 720}
    SCREENSHOT_DIR: str = str(BASE_DIR / "test-results" / "screenshots")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


class LocalConfig(Config):
    """Local developer run configuration."""


class CIConfig(Config):
    """CI configuration: shared runners are slower, so allow more time."""

    EXPECT_TIMEOUT_MS: int = int(os.environ.get("EXPECT_TIMEOUT_MS", "15000"))
    POLL_INTERVAL_S: float = 0.25
    REACHABILITY_TIMEOUT_S: int = 30


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses TEST_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TEST_ENV", "local")
    return config.get(env, config["default"])
