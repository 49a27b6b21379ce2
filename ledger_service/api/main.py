"""FastAPI application factory"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from ledger_service.api.dependencies import get_request_id
from ledger_service.api.middleware import RequestIDMiddleware, MetricsMiddleware
from ledger_service.api.v1 import accounts, transactions
from ledger_service.config import settings
from ledger_service.domain.exceptions import NotFoundError, ValidationError
from ledger_service.infrastructure.observability.logging import log_domain_error, setup_logging
from ledger_service.utils.date_utils import format_timestamp

# Setup structured logging
setup_logging(settings.log_level)


def error_response(
    request: Request,
    status_code: int,
    message: str,
    details: Optional[List[Dict[str, Any]]] = None,
) -> JSONResponse:
    """Build the common error envelope"""
    body: Dict[str, Any] = {
        "error": message,
        "statusCode": status_code,
        "timestamp": format_timestamp(datetime.now(timezone.utc)),
        "path": _request_path(request),
    }
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


def _request_path(request: Request) -> str:
    """Path plus query string, e.g. /transactions?from=2024-01-01"""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def _field_name(loc) -> str:
    # ("body", "amount") -> "amount"; ("query", "from") -> "from"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    log_domain_error(get_request_id(request), request.url.path, status.HTTP_400_BAD_REQUEST, exc.message)
    return error_response(request, status.HTTP_400_BAD_REQUEST, exc.message, exc.details)


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    log_domain_error(get_request_id(request), request.url.path, status.HTTP_404_NOT_FOUND, str(exc))
    return error_response(request, status.HTTP_404_NOT_FOUND, str(exc))


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [{"field": _field_name(err.get("loc", ())), "message": err.get("msg", "")} for err in exc.errors()]
    log_domain_error(get_request_id(request), request.url.path, status.HTTP_400_BAD_REQUEST, "Validation failed")
    return error_response(request, status.HTTP_400_BAD_REQUEST, "Validation failed", details)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(request, exc.status_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logging.error(
        f"Unexpected error: {exc}",
        exc_info=exc,
        extra={"request_id": get_request_id(request), "path": request.url.path},
    )
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title=settings.api_title,
        description="Ledger service recording transactions and deriving account balances",
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Health check endpoint
    @app.get("/health", tags=["health"])
    def health_check():
        return {
            "status": "ok",
            "service": settings.service_name,
            "timestamp": format_timestamp(datetime.now(timezone.utc)),
        }

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(transactions.router, tags=["transactions"])
    app.include_router(accounts.router, tags=["accounts"])

    return app


app = create_app()
