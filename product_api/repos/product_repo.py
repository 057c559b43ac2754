# product_api/repos/product_repo.py
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator, List

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError, TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from product_api.data.models.product import ProductModel
from product_api.domain.errors import StorageError, StorageUnavailableError, StorageTimeoutError
from product_api.utils.logging import get_logger
from product_api.utils.retry import db_retry

logger = get_logger(__name__)

# SQLSTATE raised by postgres when statement_timeout fires
QUERY_CANCELED = "57014"


def classify_storage_error(exc: SQLAlchemyError) -> StorageError:
    if isinstance(exc, PoolTimeoutError) or getattr(exc, "connection_invalidated", False):
        return StorageUnavailableError(str(exc))
    if getattr(getattr(exc, "orig", None), "pgcode", None) == QUERY_CANCELED:
        return StorageTimeoutError(str(exc))
    return StorageError(str(exc))


class ProductRepo:
    """
    One SQL statement per call. Driver errors never leave this class
    as SQLAlchemy exceptions, only as StorageError and its subclasses.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.debug(f"{operation} failed: {e}")
            raise classify_storage_error(e) from e

    @db_retry()
    def get_product(self, product_id: int) -> ProductModel | None:
        with self._storage_errors("get_product"):
            return self.db.execute(
                select(ProductModel).where(ProductModel.id == product_id)
            ).scalar_one_or_none()

    @db_retry()
    def list_products(self, start: int, count: int) -> List[ProductModel]:
        with self._storage_errors("list_products"):
            rows = self.db.execute(
                select(ProductModel).order_by(ProductModel.id).offset(start).limit(count)
            ).scalars().all()
        return list(rows)

    @db_retry()
    def create_product(self, name: str, price: Decimal) -> ProductModel:
        product = ProductModel(name=name, price=price)
        with self._storage_errors("create_product"):
            self.db.add(product)
            self.db.commit()
        return product

    @db_retry()
    def update_product(self, product_id: int, name: str, price: Decimal) -> int:
        with self._storage_errors("update_product"):
            result = self.db.execute(
                update(ProductModel)
                .where(ProductModel.id == product_id)
                .values(name=name, price=price)
            )
            self.db.commit()
        return result.rowcount

    @db_retry()
    def delete_product(self, product_id: int) -> int:
        with self._storage_errors("delete_product"):
            result = self.db.execute(
                delete(ProductModel).where(ProductModel.id == product_id)
            )
            self.db.commit()
        return result.rowcount
