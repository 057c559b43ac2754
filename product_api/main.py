# product_api/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from product_api.api.errors import register_error_handlers
from product_api.api.middleware import register_access_log
from product_api.api.routers import health, products
from product_api.data.database import AppContext
from product_api.utils.settings import DATABASE_URL, DB_CREATE_TABLES, HOST, PORT
from product_api.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(database_url: str | None = None, create_tables: bool = DB_CREATE_TABLES) -> FastAPI:
    context = AppContext(database_url or DATABASE_URL)

    if create_tables:
        try:
            context.create_tables()
        except Exception as e:
            logger.error(f"Failed to create tables: {e}")
            raise
        logger.info("Database tables ready")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Product API started, database {context.engine.url!r}")
        yield
        context.dispose()
        logger.info("Product API stopped")

    app = FastAPI(
        title="Product API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.context = context

    register_error_handlers(app)
    register_access_log(app)

    app.include_router(health.router)
    app.include_router(products.router)

    return app


def main() -> None:
    uvicorn.run(create_app(), host=HOST, port=PORT)


if __name__ == "__main__":
    main()
