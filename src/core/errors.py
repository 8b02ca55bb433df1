import logging
import traceback
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.config import settings

logger = logging.getLogger(__name__)


class BusinessRuleError(Exception):
    """A write or action that breaks a domain rule; rendered as a 400."""

    def __init__(self, message: str, field: str, reason: str):
        super().__init__(reason)
        self.message = message
        self.field = field
        self.reason = reason


def validation_error(message: str, field: str, reason: str) -> HTTPException:
    """400 carrying a field-level reason, e.g. errors.invoiceSent."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"message": message, "errors": {field: [reason]}},
    )


def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")


def _error_body(detail: Any) -> Dict[str, Any]:
    if isinstance(detail, dict) and "message" in detail:
        return detail
    return {"message": str(detail)}


def _field_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        # Drop the leading "body" / "query" / "path" segment
        loc = [str(part) for part in err.get("loc", ())[1:]] or ["_root"]
        errors.setdefault(".".join(loc), []).append(err.get("msg", "Invalid value"))
    return errors


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data", "errors": _field_errors(exc)},
    )


async def business_rule_handler(request: Request, exc: BusinessRuleError) -> JSONResponse:
    logger.info(f"Business rule rejected {request.method} {request.url.path}: {exc.field}: {exc.reason}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message, "errors": {exc.field: [exc.reason]}},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    body: Dict[str, Optional[str]] = {"message": "Internal server error"}
    if not settings.is_production:
        body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(BusinessRuleError, business_rule_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
