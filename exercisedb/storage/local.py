"""Read-only access to media files placed on local disk."""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from exercisedb.models.media import TierOutcome

logger = logging.getLogger(__name__)


@dataclass
class LocalMediaStore:
    """Flat directory of media files keyed by filename.

    Files are placed here by deployment; this store only ever reads them.
    The filename is joined directly onto `root`, so callers must pass a
    name that has already been validated.
    """

    root: Path
    name: str = "local"

    def path_for(self, filename: str) -> Path:
        return self.root / filename

    async def fetch(self, filename: str) -> TierOutcome:
        path = self.path_for(filename)
        try:
            content = await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            return TierOutcome.miss()
        except OSError as e:
            logger.error(
                f"Error reading local media file {path}: "
                f"exception_type={type(e).__name__}, error={e}"
            )
            return TierOutcome.error(str(e))
        return TierOutcome.hit(content)
