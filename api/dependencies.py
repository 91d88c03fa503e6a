# api/dependencies.py
from typing import Iterator
from fastapi import Request
from sqlalchemy.orm import Session

from core.sa.database import Database

def get_database(request: Request) -> Database:
    return request.app.state.database

def get_db(request: Request) -> Iterator[Session]:
    """Get a database session.

    This is a FastAPI dependency that opens a session on the application's
    Database for each request. The session is closed when the request is
    complete.

    Yields:
        Session: A SQLAlchemy session
    """
    session = get_database(request).get_session()
    try:
        yield session
    finally:
        session.close()
