from collections.abc import Generator

import pytest

from src.main.config import get_settings
from src.testing.pytest_plugin import call_next, request_factory  # noqa: F401


@pytest.fixture
def reset_settings() -> Generator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
