"""
Database handle

Owns the async engine and the session factory. Constructed once by create_app and
shared through app.state; each request opens and closes its own session.

On SQLite every transaction is opened with BEGIN IMMEDIATE, so the first read of a
unit of work already holds the database write lock and the checks it makes stay true
until commit. Foreign keys are enforced on every connection.
"""

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from riskengine.adapter.services.sequence_allocator import SUPPORTED_DIALECTS

# Register every table on SQLModel.metadata
import riskengine.domain.entities  # noqa: F401


class Database:
    def __init__(self, uri: str, echo: bool = False, busy_timeout: float = 30.0):
        backend = make_url(uri).get_backend_name()
        if backend not in SUPPORTED_DIALECTS:
            raise ValueError(
                f"Unsupported database backend '{backend}' in DB_URI, "
                f"expected one of: {', '.join(sorted(SUPPORTED_DIALECTS))}"
            )

        # Seconds a SQLite connection waits for another writer's lock
        connect_args = {"timeout": busy_timeout} if backend == "sqlite" else {}

        self.uri = uri
        self.engine = create_async_engine(uri, echo=echo, future=True, connect_args=connect_args)
        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        if backend == "sqlite":
            self._configure_sqlite()

    def _configure_sqlite(self):
        # The driver's own transaction handling is switched off; SQLAlchemy emits BEGIN
        @event.listens_for(self.engine.sync_engine, "connect")
        def on_connect(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(self.engine.sync_engine, "begin")
        def on_begin(conn):
            conn.exec_driver_sql("BEGIN IMMEDIATE")

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def create_all(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def drop_all(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)

    async def dispose(self):
        await self.engine.dispose()
