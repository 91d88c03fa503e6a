import click
from core.sa.database import Database
from core.sa.repositories import BookRepository, CollectionRepository

@click.command()
@click.option('--database-url', default=None, help='SQLAlchemy URL (defaults to DATABASE_URL)')
def collections(database_url):
    """List collections with their books in position order"""
    db = Database(database_url)
    try:
        db.init_db()
        with db.get_db() as session:
            collection_repo = CollectionRepository(session)
            book_repo = BookRepository(session)

            found = collection_repo.list_with_books()
            if not found:
                click.echo("No collections found")
                return

            for collection in found:
                click.echo(f"{collection.id}: {collection.name}")
                for book in book_repo.get_by_collection(collection.id):
                    marker = click.style('[x]', fg='green') if book.done else '[ ]'
                    click.echo(f"  {marker} {book.position}. {book.name} (ID: {book.id})")
    finally:
        db.close()
