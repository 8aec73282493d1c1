"""Remote origin (CDN) integration for media bytes."""

from .client import CdnClient, DEFAULT_BASE_URL, BROWSER_USER_AGENT

__all__ = ["CdnClient", "DEFAULT_BASE_URL", "BROWSER_USER_AGENT"]
