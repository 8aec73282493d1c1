from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from exercisedb.app.app import create_app
from exercisedb.app.context import AppContext
from exercisedb.app.settings import Settings
from exercisedb.media.resolver import TieredMediaResolver
from tests._factories import FixedClock, RecordingTier, make_gif_bytes

LOCAL_GIF = make_gif_bytes("local")
REMOTE_GIF = make_gif_bytes("remote")
TEST_NOW = datetime(2025, 6, 1, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def call_log() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def local_tier(call_log) -> RecordingTier:
    return RecordingTier("local", files={"0001.gif": LOCAL_GIF}, calls=call_log)


@pytest.fixture
def remote_tier(call_log) -> RecordingTier:
    return RecordingTier("cdn", files={"0002.gif": REMOTE_GIF}, calls=call_log)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(now=TEST_NOW, monotonic=1000.0)


@pytest.fixture
def context(local_tier, remote_tier, clock) -> AppContext:
    return AppContext(
        settings=Settings(),
        resolver=TieredMediaResolver([local_tier, remote_tier]),
        clock=clock,
        started_at=clock.monotonic(),
    )


@pytest.fixture
def client(context) -> TestClient:
    return TestClient(create_app(context))
