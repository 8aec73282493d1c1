"""Media lookup: filename validation and the tiered resolver."""

from .validation import validate_filename
from .resolver import MediaTier, TieredMediaResolver, resolve_media

__all__ = [
    "validate_filename",
    "MediaTier",
    "TieredMediaResolver",
    "resolve_media",
]
