import logging
from collections.abc import Iterator

import pytest

from retail_tokens.config import Settings, get_settings
from retail_tokens.design_system.themes import ThemeResolver, get_resolver
from retail_tokens.logging_config import clear_context, configure_logging

_ENV_VARS = (
    "RDT_APP_NAME",
    "RDT_ENVIRONMENT",
    "RDT_DEBUG",
    "RDT_LOG_LEVEL",
    "RDT_LOG_FORMAT",
    "RDT_LOG_FILE",
    "RDT_THEME_MODE",
    "RDT_SYSTEM_THEME",
    "RDT_CSS_SELECTOR_DARK",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from RDT_* variables and cached settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    clear_context()
    logging.getLogger("retail_tokens").setLevel(logging.NOTSET)


@pytest.fixture
def resolver() -> ThemeResolver:
    return get_resolver()


@pytest.fixture
def debug_logging() -> Iterator[Settings]:
    """Route structlog through stdlib logging at DEBUG so caplog sees events."""
    settings = Settings(log_level="DEBUG", environment="testing")
    configure_logging(settings)
    yield settings
