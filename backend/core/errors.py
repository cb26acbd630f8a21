"""
Exception handlers
Errors leave the API as {"error": "<message>"}
"""
import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .storage import RecordNotFoundError

logger = logging.getLogger(__name__)

BODY_TOO_LARGE_MESSAGE = "Request entity too large"


class BodyTooLargeError(HTTPException):
    """
    Raised while reading a request body that passes the size ceiling

    An HTTPException so FastAPI's body parsing lets it through instead of
    turning it into a 400.
    """

    def __init__(self):
        super().__init__(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=BODY_TOO_LARGE_MESSAGE)


def body_too_large_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        content={"error": BODY_TOO_LARGE_MESSAGE},
    )


async def record_not_found_handler(request: Request, exc: RecordNotFoundError):
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})


async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.info(f"{request.method} {request.url.path}: rejected body ({len(exc.errors())} errors)")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid JSON body"})


async def body_too_large_handler(request: Request, exc: BodyTooLargeError):
    return body_too_large_response()


def setup_exception_handlers(app: FastAPI):
    app.add_exception_handler(RecordNotFoundError, record_not_found_handler)
    app.add_exception_handler(RequestValidationError, invalid_body_handler)
    app.add_exception_handler(BodyTooLargeError, body_too_large_handler)
