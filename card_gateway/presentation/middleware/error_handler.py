"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from card_gateway.domain.exceptions import (
    DomainException,
    CardNotFoundException,
    CardStoreException,
    InvalidCardRequestException,
)
from card_gateway.presentation.schemas import RouteNotFoundSchema
from .request_context import get_request_id, internal_error_response

logger = structlog.get_logger(__name__)

# Starlette raises these when no route matches the path or the method
ROUTE_MISS_STATUS_CODES = {404, 405}

# Any OPTIONS request is answered, like the Express cors() default
OPTIONS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,HEAD,PUT,PATCH,POST,DELETE",
}


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Render pydantic errors as ``field: reason`` pairs."""
    parts = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        field = ".".join(loc)
        parts.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(parts) or "Invalid request"


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(InvalidCardRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidCardRequestException,
    ) -> JSONResponse:
        """Handle missing or empty required fields."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed bodies and path parameters as validation errors."""
        message = _format_validation_errors(exc)
        logger.info("request_validation_failed", message=message)
        return _error_response(400, "INVALID_CARD_REQUEST", message)

    @app.exception_handler(CardNotFoundException)
    async def card_not_found_handler(
        request: Request,
        exc: CardNotFoundException,
    ) -> JSONResponse:
        """Handle update/delete of a card that does not exist."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(CardStoreException)
    async def card_store_handler(
        request: Request,
        exc: CardStoreException,
    ) -> JSONResponse:
        """Handle store failures without leaking internal detail."""
        logger.error(
            "card_store_failure",
            request_id=get_request_id(),
            operation=exc.operation,
        )
        return _error_response(500, exc.code, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> Response:
        """Answer unmatched routes with the requested path."""
        if exc.status_code in ROUTE_MISS_STATUS_CODES:
            if request.method == "OPTIONS":
                return Response(status_code=204, headers=OPTIONS_HEADERS)

            path = request.url.path
            if request.url.query:
                path = f"{path}?{request.url.query}"
            return JSONResponse(
                status_code=404,
                content=RouteNotFoundSchema(path=path).model_dump(),
            )

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "HTTP_ERROR",
                "message": str(exc.detail),
                "request_id": get_request_id(),
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return internal_error_response(get_request_id())
