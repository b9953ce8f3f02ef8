"""SQLAlchemy engine and session handling"""
import logging

from flask import g
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config import Config

logger = logging.getLogger(__name__)

Base = declarative_base()

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    future=True,
)

engine = None


def configure_engine(url=None, **kwargs):
    """
    (Re)create the engine and bind the session factory to it

    Args:
        url: database URL, defaults to Config.DATABASE_URL
        kwargs: extra create_engine arguments (poolclass, connect_args...)
    """
    global engine

    kwargs.setdefault('echo', Config.SQL_ECHO)
    engine = create_engine(url or Config.DATABASE_URL, future=True, **kwargs)
    SessionLocal.configure(bind=engine)

    logger.info("Database engine configured for dialect %s", engine.dialect.name)
    return engine


def create_schema():
    Base.metadata.create_all(bind=engine)


def get_db():
    """Request-scoped session, opened on first use"""
    if 'db' not in g:
        g.db = SessionLocal()
    return g.db


def close_db(exc=None):
    db = g.pop('db', None)
    if db is not None:
        db.close()


configure_engine()
