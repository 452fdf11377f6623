# app/core/errors.py
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class StorageUnavailable(Exception):
    """Reading or writing the document store failed."""


def error_response(message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Bodies are only checked for the fields needed to upsert; everything else is stored as given
    messages = {
        "/api/log": "Invalid daily log",
        "/api/badges": "Invalid badge list",
    }
    return error_response(
        messages.get(request.url.path, "Invalid request"),
        status_code=status.HTTP_400_BAD_REQUEST,
    )
