"""Ordered fallback across media tiers.

Each tier answers with a `TierOutcome`. The resolver awaits the tiers one
at a time in the order given, returns the first hit, and moves on for
misses and errors alike. Nothing raised inside a tier reaches the caller.
"""

import logging
from typing import Protocol, Sequence

from exercisedb.models.media import (
    Found,
    Invalid,
    MediaResult,
    NotFound,
    TierOutcome,
)
from .validation import validate_filename

logger = logging.getLogger(__name__)


class MediaTier(Protocol):
    """A read-only source of media bytes keyed by filename."""

    name: str

    async def fetch(self, filename: str) -> TierOutcome: ...


class TieredMediaResolver:
    def __init__(self, tiers: Sequence[MediaTier]):
        self.tiers = list(tiers)

    async def _try_tier(self, tier: MediaTier, filename: str) -> TierOutcome:
        try:
            return await tier.fetch(filename)
        except Exception as e:
            logger.exception(
                f"Unexpected failure in {tier.name} tier for {filename}: "
                f"exception_type={type(e).__name__}, error={e}"
            )
            return TierOutcome.error(str(e))

    async def resolve(self, filename: str) -> Found | NotFound:
        """Resolve a validated filename to bytes, or `NotFound`."""
        for tier in self.tiers:
            outcome = await self._try_tier(tier, filename)
            if outcome.status == "hit" and outcome.content is not None:
                logger.debug(f"Served {filename} from {tier.name} tier")
                return Found(content=outcome.content)
            if outcome.status == "error":
                logger.debug(
                    f"{tier.name} tier failed for {filename} ({outcome.detail}), "
                    "falling through"
                )
        return NotFound()


async def resolve_media(raw: str | None, resolver: TieredMediaResolver) -> MediaResult:
    """Validate a raw filename and, if it is acceptable, resolve it.

    Returns `Invalid` without consulting any tier when validation fails.
    """
    validated = validate_filename(raw)
    if isinstance(validated, Invalid):
        return validated
    return await resolver.resolve(validated.filename)
