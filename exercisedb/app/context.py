"""Explicitly constructed application context shared by routes."""

from dataclasses import dataclass

from exercisedb.integrations.cdn import CdnClient
from exercisedb.media.resolver import TieredMediaResolver
from exercisedb.storage.local import LocalMediaStore
from exercisedb.utils.clock import Clock, SystemClock
from .settings import Settings


@dataclass
class AppContext:
    settings: Settings
    resolver: TieredMediaResolver
    clock: Clock
    started_at: float


def build_context(
    settings: Settings | None = None, clock: Clock | None = None
) -> AppContext:
    """Wire the default media tiers: local disk first, then the CDN."""
    settings = settings or Settings.from_env()
    clock = clock or SystemClock()
    resolver = TieredMediaResolver(
        [
            LocalMediaStore(root=settings.media_root),
            CdnClient(
                base_url=settings.media_origin_base_url,
                timeout_seconds=settings.media_fetch_timeout_seconds,
            ),
        ]
    )
    return AppContext(
        settings=settings,
        resolver=resolver,
        clock=clock,
        started_at=clock.monotonic(),
    )
