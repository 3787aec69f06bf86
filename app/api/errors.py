import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.services.product_service import ProductNotFoundError
from app.utils.timestamps import utc_now_iso
from app.utils.validators import ProductValidationError

logger = logging.getLogger(__name__)

AVAILABLE_ROUTES = [
    "GET /",
    "GET /api/products",
    "GET /api/products/:id",
    "POST /api/products",
    "PUT /api/products/:id",
    "DELETE /api/products/:id",
]


def _requested_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


async def product_validation_handler(request: Request, exc: ProductValidationError):
    """Invalid path id or payload field -> 400 naming the field and the raw value."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({
            "message": exc.message,
            "field": exc.field,
            "received": exc.received,
        })
    )


async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "message": str(exc),
            "availableIds": exc.available_ids,
        }
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    A body FastAPI could not decode (malformed JSON, not an object).
    Reported like any other field failure, with status 400.
    """
    errors = exc.errors()
    received = errors[0].get("input") if errors else None
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({
            "message": "Request body must be a JSON object",
            "field": "body",
            "received": received,
        })
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and unsupported methods both answer with the route listing."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.info(f"404 - Route not found: {request.method} {_requested_url(request)}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "message": "Route not found",
                "requestedUrl": _requested_url(request),
                "method": request.method,
                "timestamp": utc_now_iso(),
                "availableRoutes": AVAILABLE_ROUTES,
            }
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Catch-all for anything not handled above -> 500.

    Stack detail is only exposed when running in development.
    """
    logger.error(
        f"Unhandled error on {request.method} {_requested_url(request)}: {exc}",
        exc_info=exc
    )

    content = {
        "message": str(exc) or "Internal server error occurred",
        "timestamp": utc_now_iso(),
        "path": _requested_url(request),
        "method": request.method,
    }
    if get_settings().is_development:
        content["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        content["details"] = repr(exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every JSON error handler to the application."""
    app.add_exception_handler(ProductValidationError, product_validation_handler)
    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
