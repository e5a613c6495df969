"""
Application Exception Handling

Single AppException class for all HTTP-facing errors with FastAPI integration.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from catalog_service.store.base import StoreError


logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Price cannot be negative", "VALIDATION_ERROR", 400)

    Error Codes:
        - VALIDATION_ERROR (400)
        - MALFORMED_REQUEST (400)
        - DUPLICATE_PART_NUMBER (409)
        - STORE_FAILURE (500)
        - INVENTORY_VALUE_OVERFLOW (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "VALIDATION_ERROR")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to consistent JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(exc.to_dict())
    )


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Report undecodable bodies and missing parameters as 400."""
    errors = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    logger.debug(f"Malformed request to {request.url.path}: {errors}")
    return await app_exception_handler(request, malformed_request(errors))


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Report backing store failures as 500."""
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}")
    return await app_exception_handler(request, store_failure())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StoreError, store_error_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def validation_error(reason: str) -> AppException:
    """Create validation error exception."""
    return AppException(reason, "VALIDATION_ERROR", 400)


def duplicate_part_number(part_number: str) -> AppException:
    """Create duplicate part number exception."""
    return AppException(
        f"Duplicate part number not allowed: {part_number}",
        "DUPLICATE_PART_NUMBER",
        409,
        {"part_number": part_number}
    )


def malformed_request(errors: Optional[list] = None) -> AppException:
    """Create malformed request exception."""
    details = {"errors": errors} if errors else {}
    return AppException("Malformed request", "MALFORMED_REQUEST", 400, details)


def store_failure(message: str = "Product store failure") -> AppException:
    """Create store failure exception."""
    return AppException(message, "STORE_FAILURE", 500)


def inventory_value_overflow() -> AppException:
    """Create inventory value overflow exception."""
    return AppException(
        "Total inventory value is too large to represent",
        "INVENTORY_VALUE_OVERFLOW",
        500
    )
