from collections.abc import Generator
from typing import Any

import pytest

from inventory.config import get_config


@pytest.fixture(autouse=True)
def config_env(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, Any, None]:
    for name in ("GREETING", "HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield monkeypatch
    get_config.cache_clear()
