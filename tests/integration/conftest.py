"""Pytest configuration and fixtures for integration tests.

Ensures environment variables are loaded and validates required API keys
before running integration tests against the live YouTube and Gemini APIs.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


def pytest_configure(config):
    """Load .env before collection so chefti.utils.config sees the keys."""
    env_path = Path(__file__).parent.parent.parent / ".env"
    load_dotenv(env_path)

    # Saved recipes written by integration runs stay out of the user's list
    os.environ.setdefault("SAVED_RECIPES_FILE", "tmp/integration_saved_recipes.json")

    print("\n" + "=" * 70)
    print("Note: These tests require valid GEMINI_API_KEY and YOUTUBE_API_KEY")
    print(f"Environment loaded from: {env_path}")
    print("=" * 70 + "\n")


@pytest.fixture(scope="session", autouse=True)
def check_api_keys():
    """Skip the integration session when API keys are not configured."""
    missing = [name for name in ("GEMINI_API_KEY", "YOUTUBE_API_KEY") if not os.getenv(name)]
    if missing:
        pytest.skip(
            f"Integration tests skipped. Missing API keys: {', '.join(missing)}. Please set these in your .env file.",
            allow_module_level=True,
        )
