# Database connection for a local SQLite file or a PostgreSQL server
import logging
import os
from sqlalchemy import create_engine
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.orm import sessionmaker, scoped_session

from app.common.entities import BaseEntity

DATABASE_URL = os.getenv("DATABASE_URL")

POSTGRES_USER = os.getenv("POSTGRES_USER")
POSTGRES_PW = os.getenv("POSTGRES_PASSWORD", "")
POSTGRES_HOST = os.getenv("POSTGRES_HOST", "localhost")
POSTGRES_PORT = int(os.getenv("POSTGRES_PORT", "5432"))
POSTGRES_DB = os.getenv("POSTGRES_DB")

DEFAULT_DATABASE_URL = "sqlite:///./users.db"


def make_base_url() -> str:
    """
    Build the connection URL.

    An explicit DATABASE_URL wins; otherwise PostgreSQL is used when POSTGRES_DB is set,
    and a SQLite file in the working directory when it is not.
    """
    if DATABASE_URL:
        return DATABASE_URL
    if POSTGRES_DB:
        url = URL.create(
            drivername="postgresql+psycopg2",
            username=POSTGRES_USER,
            password=POSTGRES_PW,
            host=POSTGRES_HOST,
            port=POSTGRES_PORT,
            database=POSTGRES_DB,
        )
        return url.render_as_string(hide_password=False)
    return DEFAULT_DATABASE_URL


def make_connect_args(url: str) -> dict:
    """
    SQLite connections are shared with the threadpool that runs sync endpoints.
    """
    if make_url(url).get_backend_name() == "sqlite":
        return {"check_same_thread": False}
    return {}


# Build the SQLAlchemy engine and session
_url = make_base_url()
_engine = create_engine(
    _url,
    connect_args=make_connect_args(_url),
    pool_pre_ping=True,
    future=True,
)


SessionLocal = scoped_session(
    sessionmaker(
        bind=_engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )
)


def init_db() -> None:
    """Creates tables if they do not already exist."""
    # entity modules register their tables on import
    import app.user.user_entities  # noqa: F401

    BaseEntity.metadata.create_all(_engine)


# set SQLAlchemy logs to only error
logging.basicConfig()
logging.getLogger("sqlalchemy").setLevel(logging.ERROR)
