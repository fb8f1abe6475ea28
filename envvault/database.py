"""SQLAlchemy engine + session factory for the SQLite store file."""

from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import NullPool


class Base(DeclarativeBase):
    pass


def create_vault_engine(db_path: Path) -> Engine:
    # NullPool: every session opens a fresh connection and closes it on exit
    return create_engine(f"sqlite:///{db_path}", poolclass=NullPool)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create the secrets table if it does not exist yet."""
    # Register the model on Base.metadata before create_all
    from envvault.models import Secret  # noqa: F401

    Base.metadata.create_all(engine)
