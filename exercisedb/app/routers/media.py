"""Media proxy router: serves GIFs from local disk, falling back to the CDN."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from exercisedb.media.resolver import TieredMediaResolver, resolve_media
from exercisedb.models.media import Found, Invalid, NotFound
from exercisedb.app.constants import (
    CORS_HEADERS,
    IMMUTABLE_CACHE_CONTROL,
    INVALID_FILENAME_MESSAGE,
    MEDIA_NOT_FOUND_MESSAGE,
)
from exercisedb.app.dependencies import media_resolver
from exercisedb.app.models import FailureResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/media", tags=["media"])


# `:path` so names containing "/" reach validation instead of 404ing in routing.
@router.options("/{filename:path}", status_code=204)
def media_preflight(filename: str) -> Response:
    """CORS preflight; never validates or resolves the filename."""
    return Response(status_code=204, headers=CORS_HEADERS)


@router.get(
    "/{filename:path}",
    response_class=Response,
    responses={
        200: {"content": {"image/gif": {}}},
        400: {"model": FailureResponse},
        404: {"model": FailureResponse},
    },
)
async def get_media(
    filename: str,
    resolver: TieredMediaResolver = Depends(media_resolver),
) -> Response:
    """Serve a GIF by filename.

    Local storage is tried first, then the CDN. A CDN outage is reported as
    404, the same as a file that does not exist.
    """
    result = await resolve_media(filename, resolver)
    match result:
        case Found(content=content, content_type=content_type):
            return Response(
                content=content,
                media_type=content_type,
                headers={**CORS_HEADERS, "Cache-Control": IMMUTABLE_CACHE_CONTROL},
            )
        case Invalid(reason=reason):
            logger.debug(f"Rejected media filename {filename!r}: {reason}")
            raise HTTPException(
                status_code=400, detail=INVALID_FILENAME_MESSAGE, headers=CORS_HEADERS
            )
        case NotFound():
            raise HTTPException(
                status_code=404, detail=MEDIA_NOT_FOUND_MESSAGE, headers=CORS_HEADERS
            )
