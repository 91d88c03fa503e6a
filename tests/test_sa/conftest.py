# tests/test_sa/conftest.py
import pytest
from sqlalchemy.orm import Session
from sqlalchemy.sql import text

from core.sa.models import Base, Collection, Book
from core.sa.database import Database

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_reading_lists.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.close()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    db_session.execute(text("DELETE FROM book"))
    db_session.execute(text("DELETE FROM collection"))
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def sample_collection(db_session):
    """Create a sample collection for testing."""
    collection = Collection(name="Sci-Fi")
    db_session.add(collection)
    db_session.commit()
    return collection

@pytest.fixture
def sample_book(db_session, sample_collection):
    """Create a sample book in the sample collection."""
    book = Book(
        name="Dune",
        position=1,
        collection_id=sample_collection.id
    )
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def shuffled_books(db_session, sample_collection):
    """Create books whose insertion order differs from their positions."""
    books = []
    for name, position in [("Hyperion", 3), ("Foundation", 1), ("Neuromancer", 2)]:
        book = Book(name=name, position=position, collection_id=sample_collection.id)
        db_session.add(book)
        books.append(book)
    db_session.commit()
    return books
