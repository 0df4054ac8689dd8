# app/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.exceptions import BaseAPIException
from app.core.logging import logger


def error_body(message: str, code: str, details=None) -> dict:
    # "error" carries the human readable message the client shows verbatim
    return {
        "error": message,
        "code": code,
        "details": details
    }

# 1. Handle Custom Logic Errors (raised by our own code)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.code, exc.details),
    )

# 2. Handle Validation Errors (Pydantic rejects a body, e.g. age="abc")
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # Get field name (e.g., "body.age" or just "age")
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        details[field] = error["msg"]

    fields = ", ".join(details) or "request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(f"Invalid input: {fields}", "VALIDATION_ERROR", details),
    )

# 3. Handle Standard HTTP Errors (404 for an unknown URL, 405, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), "HTTP_ERROR"),
    )

# 4. Handle General System Errors (bugs, driver errors)
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(str(exc) or exc.__class__.__name__, "INTERNAL_SERVER_ERROR"),
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
