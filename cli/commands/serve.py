import logging
import os
import click
import uvicorn
from core.config import get_settings

logger = logging.getLogger(__name__)

@click.command()
@click.option('--host', default=None, help='Bind address (defaults to HOST or 0.0.0.0)')
@click.option('--port', default=None, type=int, help='Bind port (defaults to PORT or 8080)')
@click.option('--database-url', default=None, help='SQLAlchemy URL (defaults to DATABASE_URL)')
@click.option('--reload', is_flag=True, help='Restart the server when code changes')
def serve(host, port, database_url, reload):
    """Run the HTTP API"""
    if database_url:
        # The app factory reads its settings from the environment
        os.environ['DATABASE_URL'] = database_url
    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    logger.info("Server starting at %s:%s", host, port)
    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
