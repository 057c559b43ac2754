"""
Tests for ProductRepo and storage error classification.
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, TimeoutError as PoolTimeoutError

from product_api.domain.errors import StorageError, StorageTimeoutError, StorageUnavailableError
from product_api.repos.product_repo import ProductRepo, classify_storage_error
from product_api.utils.settings import DB_RETRY_ATTEMPTS


class _QueryCanceled(Exception):
    pgcode = "57014"


def dropped_connection() -> OperationalError:
    return OperationalError(
        "SELECT 1", {}, Exception("server closed the connection"), connection_invalidated=True
    )


class TestProductRepo:
    """Row level behaviour against a real SQLite database."""

    def test_create_assigns_increasing_ids(self, db):
        repo = ProductRepo(db)

        first = repo.create_product("a", Decimal("1.00"))
        second = repo.create_product("b", Decimal("2.00"))

        assert (first.id, second.id) == (1, 2)

    def test_get_missing_returns_none(self, db):
        assert ProductRepo(db).get_product(7) is None

    def test_get_product(self, db, add_products):
        add_products(2)

        product = ProductRepo(db).get_product(2)

        assert product.name == "Product 1"
        assert product.price == Decimal("20.00")

    def test_update_reports_affected_rows(self, db, add_products):
        add_products(1)
        repo = ProductRepo(db)

        assert repo.update_product(1, "renamed", Decimal("5.50")) == 1
        assert repo.update_product(99, "nobody", Decimal("1.00")) == 0
        assert repo.get_product(1).name == "renamed"

    def test_delete_reports_affected_rows(self, db, add_products):
        add_products(1)
        repo = ProductRepo(db)

        assert repo.delete_product(1) == 1
        assert repo.delete_product(1) == 0
        assert repo.get_product(1) is None

    def test_list_is_ordered_and_bounded(self, db, add_products):
        add_products(6)

        page = ProductRepo(db).list_products(start=1, count=3)

        assert [p.id for p in page] == [2, 3, 4]


class TestClassifyStorageError:
    def test_pool_timeout_is_unavailable(self):
        assert isinstance(classify_storage_error(PoolTimeoutError()), StorageUnavailableError)

    def test_dropped_connection_is_unavailable(self):
        assert isinstance(classify_storage_error(dropped_connection()), StorageUnavailableError)

    def test_statement_timeout(self):
        exc = OperationalError("SELECT 1", {}, _QueryCanceled("canceling statement"))

        assert isinstance(classify_storage_error(exc), StorageTimeoutError)

    def test_everything_else_is_plain_storage_error(self):
        exc = IntegrityError("INSERT", {}, Exception("not null constraint failed"))

        assert type(classify_storage_error(exc)) is StorageError


class TestRetry:
    """Only connectivity failures are retried."""

    def test_connectivity_failure_is_retried_then_raised(self, db, monkeypatch):
        calls = []

        def failing_execute(*args, **kwargs):
            calls.append(1)
            raise dropped_connection()

        monkeypatch.setattr(db, "execute", failing_execute)

        with pytest.raises(StorageUnavailableError):
            ProductRepo(db).get_product(1)

        assert len(calls) == DB_RETRY_ATTEMPTS

    def test_other_failures_are_not_retried(self, db, monkeypatch):
        calls = []

        def failing_execute(*args, **kwargs):
            calls.append(1)
            raise OperationalError("SELECT", {}, Exception("no such column"))

        monkeypatch.setattr(db, "execute", failing_execute)

        with pytest.raises(StorageError):
            ProductRepo(db).list_products(0, 10)

        assert len(calls) == 1

    def test_session_usable_after_failure(self, db, add_products, monkeypatch):
        add_products(1)
        repo = ProductRepo(db)

        def failing_execute(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("boom"))

        monkeypatch.setattr(db, "execute", failing_execute)
        with pytest.raises(StorageError):
            repo.get_product(1)
        monkeypatch.undo()

        assert repo.get_product(1).name == "Product 0"
