"""
Errores de la aplicación y sus manejadores HTTP

Every error carries its HTTP status and a stable code so the API layer can
render it without knowing which service raised it.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StorefrontError(Exception):
    """Base exception for the Storefront API"""

    def __init__(
        self,
        message: str,
        code: str = "STOREFRONT_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response dict"""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        result.update(self.details)
        return result


class ValidationError(StorefrontError):
    """Raised when an input field is missing or malformed"""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            details={"field": field},
        )
        self.field = field


class NotFoundError(StorefrontError):
    """Raised when an entity, or an entity it references, does not exist"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404,
            details=details,
        )

    @classmethod
    def for_entity(cls, entity: str, entity_id: Any) -> "NotFoundError":
        return cls(f"{entity} with id {entity_id} not found")

    @classmethod
    def for_products(cls, missing_ids: List[str]) -> "NotFoundError":
        return cls(
            f"Products not found: {', '.join(missing_ids)}",
            details={"missingIds": missing_ids},
        )


# =============================================================================
# Exception handlers
# =============================================================================

async def storefront_exception_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report framework parsing errors in the same shape as ValidationError"""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [
        part for part in first.get("loc", ())
        if isinstance(part, str) and part not in ("body", "path", "query")
    ]
    field = str(location[-1]) if location else "body"

    return JSONResponse(
        status_code=400,
        content={
            "detail": f"{field}: {first.get('msg', 'invalid value')}",
            "code": "VALIDATION_ERROR",
            "field": field,
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Answer any other exception with a generic 500

    Starlette runs this handler inside ServerErrorMiddleware, which re-raises
    the exception afterwards so the server logs the traceback. Only the
    request context is logged here.
    """
    logger.error(
        f"Unexpected error on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {exc}"
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
