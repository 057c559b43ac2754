# product_api/api/middleware.py
import time

from fastapi import FastAPI, Request

from product_api.utils.logging import get_logger

access_logger = get_logger("product_api.access")


def register_access_log(app: FastAPI) -> None:
    """One line per request: method, path, status and duration."""

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            f"{request.method} {request.url.path} {response.status_code} {duration_ms:.1f}ms"
        )
        return response
