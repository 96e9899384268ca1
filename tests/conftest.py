"""Root pytest configuration.

Test Structure:
    tests/
    ├── user_switcher/         # Helper, domain and adapter tests
    │   └── unit/
    ├── user_switcher_config/  # Settings tests
    └── shared/                # Shared fixtures and fakes
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from user_switcher_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Make every test read settings from the current environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
