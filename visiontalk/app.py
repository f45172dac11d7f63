from __future__ import annotations

import json
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .config import Settings, get_settings
from .logging_config import configure_logging, get_logger
from .providers import RequestRouter
from .routes import api_router
from .utils.responses import error_response

logger = get_logger(__name__)


# Register global exception handlers for consistent error responses across the API
def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug("validation error", extra={"errors": exc.errors(), "path": str(request.url)})
        return JSONResponse(
            {"error": "Invalid request", "detail": jsonable_encoder(exc.errors())},
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException):
        logger.debug(
            "http error",
            extra={"detail": exc.detail, "status": exc.status_code, "path": str(request.url)},
        )
        detail = exc.detail
        if not isinstance(detail, str):
            detail = json.dumps(detail)
        return error_response(detail, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": str(request.url)})
        return error_response(str(exc) or "An unexpected error occurred.")


class PayloadLimitMiddleware:
    """Reject request bodies larger than ``max_bytes``.

    A declared ``Content-Length`` over the limit is refused before the body is
    read. Bodies without one (chunked uploads) are counted as they arrive and
    fail with a 413 ``HTTPException`` once the running total passes the limit.
    """

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        self.app = app
        self.max_bytes = max_bytes

    @property
    def message(self) -> str:
        return f"Request body too large (limit is {self.max_bytes} bytes)"

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")
        declared = Headers(scope=scope).get("content-length")
        if declared and declared.isdigit() and int(declared) > self.max_bytes:
            logger.warning(f"Rejected {path}: {declared} bytes exceeds limit of {self.max_bytes}")
            response = error_response(self.message, status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    logger.warning(f"Rejected {path}: body passed limit of {self.max_bytes} bytes")
                    raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=self.message)
            return message

        await self.app(scope, limited_receive, send)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=settings.resolved_docs_url,
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(PayloadLimitMiddleware, max_bytes=settings.max_payload_bytes)
    register_exception_handlers(app)
    app.include_router(api_router)

    @app.on_event("startup")
    async def _log_startup() -> None:
        configured = [kind.value for kind in RequestRouter(settings.provider_config()).available_providers()]
        if configured:
            logger.info(f"🚀 {settings.app_name} starting up; providers by priority: {', '.join(configured)}")
        else:
            logger.warning(f"🚀 {settings.app_name} starting up with no providers configured")

    return app


configure_logging()
app = create_app()


__all__ = ["app", "create_app"]
