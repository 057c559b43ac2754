"""
pytest configuration and fixtures.

Every test gets its own SQLite file, so ids always start at 1.
"""

from decimal import Decimal
from typing import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from product_api.data.models.product import ProductModel
from product_api.main import create_app


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'products.db'}"


@pytest.fixture
def app(database_url: str) -> Generator[FastAPI, None, None]:
    app = create_app(database_url=database_url, create_tables=True)
    yield app
    app.state.context.dispose()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def db(app: FastAPI) -> Generator[Session, None, None]:
    session = app.state.context.session_factory()
    yield session
    session.close()


@pytest.fixture
def add_products(db: Session) -> Callable[[int], None]:
    """Insert `count` rows named "Product <i>" priced (i + 1) * 10."""

    def _add(count: int) -> None:
        for i in range(count):
            db.add(ProductModel(name=f"Product {i}", price=Decimal((i + 1) * 10)))
        db.commit()

    return _add
