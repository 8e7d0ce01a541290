from __future__ import annotations
import os
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, DeclarativeBase

DB_URL_ENV = "IV_TRACKER_DB_URL"
DEFAULT_DB_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "iv_tracker.db"))


def database_url() -> str:
    """URL de la base de trackers; la variable de entorno se lee en cada llamada."""
    return os.environ.get(DB_URL_ENV) or f"sqlite:///{DEFAULT_DB_PATH}"


@lru_cache(maxsize=None)
def _engine_for(url: str) -> Engine:
    return create_engine(url, echo=False, future=True)


def get_engine(url: Optional[str] = None) -> Engine:
    # el engine se crea al primer uso, no al importar el módulo
    return _engine_for(url or database_url())


class Base(DeclarativeBase):
    pass


@contextmanager
def session_scope(bind: Engine | None = None) -> Iterator[Session]:
    factory = sessionmaker(bind=bind or get_engine(), autoflush=False, future=True)
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
