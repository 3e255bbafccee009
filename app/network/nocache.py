# app/network/nocache.py

from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from app import settings


class NoCacheMiddleware(BaseHTTPMiddleware):
    """Deck state changes on every shuffle/draw/reset, so deck responses must never be cached."""

    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        if request.url.path.startswith(f"{settings.API_PREFIX}/decks"):
            response.headers["Cache-Control"] = "no-store"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response
