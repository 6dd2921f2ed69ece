# app/database.py
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from app.core.config import get_settings

settings = get_settings()

# ---------------------------------------------------------
# Postgres connection (serverless pooler)
#
# - pool_pre_ping=True: validate connections before using them
# - pool_size=1       : one long-lived connection per process
# - max_overflow=0    : do not open extra connections beyond the pool
#
# SQLite (tests / local dev) shares a single connection so an
# in-memory database survives across sessions.
# ---------------------------------------------------------

db_url = settings.database_url

if db_url.startswith("sqlite"):
    engine = create_engine(
        db_url,
        echo=settings.SQL_ECHO,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    engine = create_engine(
        db_url,
        echo=settings.SQL_ECHO,
        pool_pre_ping=True,
        pool_size=1,
        max_overflow=0,
    )


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup, so it doubles as the
    connectivity check: an unreachable database fails here.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
