# product_api/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_api.domain.errors import StorageError, StorageTimeoutError, StorageUnavailableError
from product_api.utils.logging import get_logger

logger = get_logger(__name__)

# request part that failed to decode -> message for the client
_DECODE_MESSAGES = {
    "path": "Invalid product ID",
    "query": "Invalid paging parameters",
    "body": "Invalid Payload",
}

# raised by FastAPI itself when the body cannot be read (e.g. not UTF-8)
_BODY_PARSE_DETAIL = "There was an error parsing the body"


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = str(exc.detail)
    if exc.status_code == 400 and message == _BODY_PARSE_DETAIL:
        message = _DECODE_MESSAGES["body"]
    return error_response(exc.status_code, message, getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    locations = {err["loc"][0] for err in exc.errors() if err.get("loc")}
    for location in ("path", "query", "body"):
        if location in locations:
            return error_response(400, _DECODE_MESSAGES[location])
    return error_response(400, _DECODE_MESSAGES["body"])


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    # full detail stays in the log, the client only sees the class of failure
    logger.error(
        f"{request.method} {request.url.path} storage failure: {exc}",
        exc_info=exc,
    )
    if isinstance(exc, StorageTimeoutError):
        return error_response(504, "Database request timed out")
    if isinstance(exc, StorageUnavailableError):
        return error_response(503, "Database unavailable")
    return error_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
