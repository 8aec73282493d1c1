from fastapi import Depends, Request

from exercisedb.media.resolver import TieredMediaResolver
from .context import AppContext


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def media_resolver(context: AppContext = Depends(get_context)) -> TieredMediaResolver:
    return context.resolver
