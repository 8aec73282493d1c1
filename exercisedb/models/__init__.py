from .media import MediaRequest, MediaResult, Found, NotFound, Invalid, TierOutcome

__all__ = [
    "MediaRequest",
    "MediaResult",
    "Found",
    "NotFound",
    "Invalid",
    "TierOutcome",
]
