"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests
    │   ├── domain/            # Geometry, treemap, aggregation, allocation rules
    │   ├── application/       # Sync service, watcher, commands, queries
    │   ├── infrastructure/    # In-memory document store
    │   └── config/            # Settings and logging setup
    ├── cross_domain/
    │   └── e2e/               # Full edit -> sync scenarios on a document store
    └── shared/                # Shared fixtures and utilities
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from shape_of_money_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Tests may override engine settings in config/.env.test
TEST_ENV_FILE = PROJECT_ROOT / "config" / ".env.test"
if TEST_ENV_FILE.exists():
    load_dotenv(TEST_ENV_FILE)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "e2e: Scenarios running edits and sync passes on a whole document",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_engine_settings():
    """Start and finish the session with freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
