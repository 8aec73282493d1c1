from .local import LocalMediaStore

__all__ = ["LocalMediaStore"]
