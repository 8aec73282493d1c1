from .media import RecordingTier, FixedClock, make_gif_bytes

__all__ = ["RecordingTier", "FixedClock", "make_gif_bytes"]
