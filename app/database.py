from contextlib import contextmanager

from sqlmodel import SQLModel, create_engine
from sqlalchemy.orm import sessionmaker

from .config import DATABASE_URL, DB_MAX_OVERFLOW, DB_POOL_SIZE

# Registers the tables with SQLModel metadata
from .models import Task, User  # noqa: F401


def build_engine(url: str = DATABASE_URL):
    """Create the engine all requests share.

    sqlite is only used for local runs and tests, so it gets the driver's
    default pool. Postgres gets a bounded QueuePool sized from config.
    """
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


engine = build_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Yield a session for one request, returning its connection to the pool."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_tables():
    SQLModel.metadata.create_all(bind=engine)
