# app/routes/api_server.py

import traceback

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import settings
from app.network.nocache import NoCacheMiddleware
from app.protocol.message_models import ErrorResponse
from app.routes import deck_routes, utility_routes
from app.services.logger_utils import make_logger
from decklogic.errors import DeckError

logger = make_logger("api_server")
log_error = make_logger("api_server", error=True)

NOT_FOUND_MESSAGE = "The requested URL was not found on our servers."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred."

app = FastAPI(title="Ponjo API")
app.add_middleware(NoCacheMiddleware)

# ✅ CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(deck_routes.router, prefix=settings.API_PREFIX)
app.include_router(utility_routes.router, prefix=settings.API_PREFIX)


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(status=status_code, error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ✅ domain errors → 400
@app.exception_handler(DeckError)
async def deck_error_handler(request: Request, exc: DeckError):
    logger(f"{request.method} {request.url.path} → 400 {exc.kind}: {exc.message}")
    return error_response(400, exc.kind, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    missing = [e for e in errors if e.get("type") == "missing"]
    if missing:
        field = missing[0].get("loc", ["", "parameter"])[-1]
        return error_response(400, "MissingParameter", f"The '{field}' parameter is required.")
    return error_response(400, "InvalidArgument", "; ".join(e.get("msg", "invalid value") for e in errors))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return error_response(404, "NotFound", NOT_FOUND_MESSAGE)
    if exc.status_code == 405:
        return error_response(405, "MethodNotAllowed", f"{request.method} is not allowed on {request.url.path}.")
    return error_response(exc.status_code, "HTTPError", str(exc.detail))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    log_error(f"{request.method} {request.url.path} → 500\n{''.join(traceback.format_exception(exc))}")
    return error_response(500, "InternalServerError", INTERNAL_ERROR_MESSAGE)
