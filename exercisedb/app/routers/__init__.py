from .media import router as media_router
from .health import router as health_router

__all__ = ["media_router", "health_router"]
