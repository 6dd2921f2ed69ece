# app/core/errors.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render HTTPException as {"error": "<detail>"} instead of FastAPI's {"detail": ...}.
    """
    return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed ids, non-numeric bounds, unknown PATCH keys, etc. are client errors (400).

    Message format: "<location>: <message>" for the first failing field.
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{loc}: {first.get('msg', 'Invalid value')}" if loc else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
