"""CDN client used as the fallback media tier."""

import asyncio
import logging
from dataclasses import dataclass

import httpx

from exercisedb.models.media import TierOutcome

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://v1.cdn.exercisedb.dev"
DEFAULT_TIMEOUT_SECONDS = 15.0
# The origin rejects httpx's default User-Agent.
BROWSER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


@dataclass
class CdnClient:
    """Fetches media bytes from `<base_url>/media/<filename>`.

    Every failure is folded into a `TierOutcome`: a non-200 status is a miss,
    while timeouts and transport errors are logged and reported as errors.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = BROWSER_USER_AGENT
    name: str = "cdn"

    def media_url(self, filename: str) -> str:
        return f"{self.base_url.rstrip('/')}/media/{filename}"

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}

    async def _get(self, url: str) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            return await client.get(url, headers=self._headers())

    async def fetch(self, filename: str) -> TierOutcome:
        url = self.media_url(filename)
        try:
            # httpx timeouts apply per phase; this bounds the whole fetch.
            async with asyncio.timeout(self.timeout_seconds):
                response = await self._get(url)
        except TimeoutError:
            logger.error(
                f"Timed out after {self.timeout_seconds}s fetching media from CDN: {url}"
            )
            return TierOutcome.error("timeout")
        except httpx.HTTPError as e:
            logger.error(
                f"Error fetching media from CDN {url}: "
                f"exception_type={type(e).__name__}, error={e}"
            )
            return TierOutcome.error(str(e))

        if response.status_code != 200:
            logger.warning(f"CDN returned {response.status_code} for {url}")
            return TierOutcome.miss()

        return TierOutcome.hit(response.content)
