import logging

from sqlalchemy import inspect
from sqlalchemy.orm import Session, sessionmaker

from todoapi.models.base import Base, create_store_engine
from todoapi.models.entities import todo  # noqa: F401  (registers the todos table)

logger = logging.getLogger(__name__)


class Database:
    """The process-local store: one engine and the sessions bound to it."""

    def __init__(self, database_url: str):
        self.engine = create_store_engine(database_url)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)

        inspector = inspect(self.engine)
        tables = inspector.get_table_names()
        logger.info(f"Tables in database: {tables}")

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()
