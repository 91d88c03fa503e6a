# core/sa/database.py
import logging
from contextlib import contextmanager
from typing import Iterator, Optional
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool, QueuePool

from core.config import get_database_url, get_sql_echo
from core.sa.models import Base

logger = logging.getLogger(__name__)

class Database:
    def __init__(self, connection_string: Optional[str] = None, **engine_kwargs):
        """Initialize database connection

        Args:
            connection_string: Database connection string (e.g., "sqlite:///data.db")
                              If None, will use the DATABASE_URL environment variable
            engine_kwargs: Additional keyword arguments to pass to create_engine
        """
        self.connection_string = connection_string or get_database_url()
        self.is_sqlite = self.connection_string.startswith("sqlite")

        engine_kwargs.setdefault("echo", get_sql_echo())

        # SQLite-specific settings
        if self.is_sqlite:
            # Requests are served from a threadpool, so the connection may cross threads
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
            engine_kwargs.setdefault("poolclass", NullPool)

        # Server database settings
        else:
            engine_kwargs.setdefault("pool_size", 5)
            engine_kwargs.setdefault("max_overflow", 10)
            engine_kwargs.setdefault("poolclass", QueuePool)

        self.engine = create_engine(
            self.connection_string,
            **engine_kwargs
        )

        # Create sessionmaker
        self._SessionFactory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

    @contextmanager
    def get_db(self) -> Iterator[Session]:
        """Context manager for database sessions"""
        session: Session = self._SessionFactory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def init_db(self) -> None:
        """Create any missing tables. Existing tables are left untouched."""
        existing = set(inspect(self.engine).get_table_names())
        missing = [name for name in Base.metadata.tables if name not in existing]
        Base.metadata.create_all(self.engine)
        if missing:
            logger.info("Created tables: %s", ", ".join(missing))
        else:
            logger.debug("Schema already up to date")

    def get_session(self) -> Session:
        return self._SessionFactory()

    def close(self) -> None:
        """Release all pooled connections."""
        self.engine.dispose()
