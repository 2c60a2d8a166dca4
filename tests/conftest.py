"""
Pytest configuration and fixtures
"""
import os
from datetime import datetime, timezone
from typing import Callable, Iterator

import pytest

# Pin settings before the service modules are imported
os.environ["SDUI_DEBUG"] = "true"
os.environ["SDUI_FORCED_MODE"] = ""
os.environ["SDUI_TIMEZONE"] = ""

from fastapi.testclient import TestClient

from sdui_service.api.v1.ui_config import get_clock, get_pipeline
from sdui_service.main import app
from sdui_service.services.analytics import analytics_sink
from sdui_service.services.composer import ScreenComposer
from sdui_service.services.pipeline import UIPipeline

# Monday, inside the lunch-hour flash sale
FIXED_NOW = datetime(2025, 6, 2, 12, 47, 37, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def composer(fixed_now) -> ScreenComposer:
    """Composer whose clock never moves"""
    return ScreenComposer(clock=lambda: fixed_now)


@pytest.fixture
def pipeline(composer) -> UIPipeline:
    return UIPipeline(composer=composer)


@pytest.fixture
def client(fixed_now) -> Iterator[TestClient]:
    """HTTP client with the ui-config clock pinned to FIXED_NOW"""
    app.dependency_overrides[get_clock] = lambda: (lambda: fixed_now)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def force_mode() -> Iterator[Callable[[str], None]]:
    """Pin the ui-config endpoint to one presentation mode"""
    def _force(mode: str) -> None:
        app.dependency_overrides[get_pipeline] = lambda: UIPipeline(forced_mode=mode)

    yield _force
    app.dependency_overrides.pop(get_pipeline, None)


@pytest.fixture(autouse=True)
def reset_analytics():
    analytics_sink.reset()
    yield
    analytics_sink.reset()
