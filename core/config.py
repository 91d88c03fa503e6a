# core/config.py
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    database_url: str
    cors_origin: str
    host: str
    port: int
    log_level: str
    sql_echo: bool


def get_database_url() -> str:
    return os.getenv("DATABASE_URL", "sqlite:///data.db")


def get_sql_echo() -> bool:
    return os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes")


def get_settings() -> Settings:
    """Read service settings from the environment."""
    return Settings(
        database_url=get_database_url(),
        cors_origin=os.getenv("CORS_ORIGIN", "http://localhost:8000"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        sql_echo=get_sql_echo(),
    )
