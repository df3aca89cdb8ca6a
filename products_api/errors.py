"""
Exception handlers rendering every error as {"error": "<message>"}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)

INVALID_ID = "Invalid product ID"
INVALID_QUERY = "Invalid query parameter"
INVALID_PAYLOAD = "Invalid request payload"
INTERNAL_ERROR = "Internal server error"


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """Build a JSON error body with the given status."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def validation_message(errors) -> str:
    """Pick the 400 message for a list of pydantic/FastAPI validation errors."""
    locations = {error["loc"][0] for error in errors if error.get("loc")}
    if "path" in locations:
        return INVALID_ID
    if "query" in locations:
        return INVALID_QUERY
    return INVALID_PAYLOAD


async def http_exception_handler(request: Request, exc: HTTPException):
    """Render an HTTPException, including routing 404s and 405s."""
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer request parsing failures with 400."""
    message = validation_message(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(400, message)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log anything the handlers did not classify and answer 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI):
    """Install the error handlers on an application."""
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
