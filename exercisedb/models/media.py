"""Media request and resolution result models."""

from typing import Literal, Self

from pydantic import BaseModel

GIF_CONTENT_TYPE = "image/gif"

TierStatus = Literal["hit", "miss", "error"]


class MediaRequest(BaseModel):
    """A filename that passed validation and may be handed to the resolver."""

    filename: str


class Found(BaseModel):
    """Bytes resolved from one of the tiers."""

    kind: Literal["found"] = "found"
    content: bytes
    content_type: str = GIF_CONTENT_TYPE


class NotFound(BaseModel):
    """No tier produced bytes, or the origin was unreachable."""

    kind: Literal["not_found"] = "not_found"


class Invalid(BaseModel):
    """The requested filename was rejected before any I/O."""

    kind: Literal["invalid"] = "invalid"
    reason: str


MediaResult = Found | NotFound | Invalid


class TierOutcome(BaseModel):
    """Result of a single tier lookup.

    A `miss` means the tier does not have the file. An `error` means the
    tier failed in some other way; callers still move on to the next tier.
    """

    status: TierStatus
    content: bytes | None = None
    detail: str | None = None

    @classmethod
    def hit(cls, content: bytes) -> Self:
        return cls(status="hit", content=content)

    @classmethod
    def miss(cls) -> Self:
        return cls(status="miss")

    @classmethod
    def error(cls, detail: str) -> Self:
        return cls(status="error", detail=detail)
