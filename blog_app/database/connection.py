"""
Database engine, session factory and declarative base.

One session per request: routes get it through the get_db dependency,
which always closes it when the request is done.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from blog_app.config import settings


def build_engine(database_url: str, timeout: int = settings.database_timeout):
    """
    Create an engine for the given URL.

    SQLite needs check_same_thread=False because FastAPI may touch the
    session from different threads, and a busy timeout so a locked
    database raises instead of hanging forever.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": timeout}
    return create_engine(database_url, connect_args=connect_args)


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a database session and close it afterwards"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
