# api/main.py
import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.errors import validation_exception_handler
from api.routes import collections
from core.config import Settings, get_settings
from core.sa.database import Database

logger = logging.getLogger(__name__)

def create_app(database: Optional[Database] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around a single Database that lives as long as the app."""
    settings = settings or get_settings()

    app = FastAPI(title="Reading Lists API", version="0.1.0")
    app.state.database = database or Database(settings.database_url)

    # CORS configuration: one browser origin, read/create/toggle only
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET", "POST", "PATCH"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(collections.router)

    # Create the schema before serving; failures here stop the server from starting
    @app.on_event("startup")
    def startup_event():
        app.state.database.init_db()
        logger.info("Database ready at %s", app.state.database.engine.url)

    @app.on_event("shutdown")
    def shutdown_event():
        app.state.database.close()
        logger.info("Database closed")

    return app
