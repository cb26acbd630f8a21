"""
Middleware configuration
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from backend.config import Settings

from .errors import BodyTooLargeError, body_too_large_response

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """
    Enforces the request body ceiling

    A declared Content-Length over the limit is refused before the app runs.
    Bodies without one (chunked uploads) are counted as they stream in, and
    reading past the limit raises BodyTooLargeError from receive().
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_bytes:
            self._log_rejection(scope, content_length)
            await body_too_large_response()(scope, receive, send)
            return

        received = 0
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    self._log_rejection(scope, str(received))
                    raise BodyTooLargeError()
            return message

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracking_send)
        except BodyTooLargeError:
            # normally answered by the app's exception handler, this covers reads outside it
            if response_started:
                raise
            await body_too_large_response()(scope, receive, send)

    def _log_rejection(self, scope: Scope, size: str) -> None:
        logger.warning(
            f"Rejected {scope.get('method')} {scope.get('path')}: "
            f"{size} bytes exceeds {self.max_body_bytes}"
        )


def setup_middleware(app: FastAPI, settings: Settings):
    """Configure all middleware for the application"""

    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.MAX_BODY_BYTES)

    # CORS - no origin restriction
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
