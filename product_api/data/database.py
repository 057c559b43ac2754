# product_api/data/database.py
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from product_api.utils.settings import DB_POOL_TIMEOUT, DB_STATEMENT_TIMEOUT_MS

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    options = {"pool_pre_ping": True, "future": True}

    if url.get_backend_name() == "sqlite":
        # sessions hop between the worker threads of the server
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_timeout"] = DB_POOL_TIMEOUT
        if url.get_backend_name() == "postgresql":
            options["connect_args"] = {
                "options": f"-c statement_timeout={DB_STATEMENT_TIMEOUT_MS}",
            }

    return create_engine(url, **options)


class AppContext:
    """
    Everything shared between requests: the engine (and its pool)
    and the session factory. Built once by create_app, kept on app.state.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = build_engine(database_url)
        # expire_on_commit=False so an entity can be serialized after commit without a reload
        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
        )

    def create_tables(self) -> None:
        # models have to be imported before create_all
        from product_api.data import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    context: AppContext = request.app.state.context
    db = context.session_factory()
    try:
        yield db
    finally:
        db.close()
