import click
from core.sa.database import Database

@click.command(name='init-db')
@click.option('--database-url', default=None, help='SQLAlchemy URL (defaults to DATABASE_URL)')
def init_db(database_url):
    """Create the collection and book tables if they are missing"""
    db = Database(database_url)
    try:
        db.init_db()
    finally:
        db.close()
    click.echo(f"Database initialized at {db.engine.url}")
