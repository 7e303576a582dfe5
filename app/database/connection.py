import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.configuration.settings import Configuration

configuration = Configuration()

def _build_engine():
    db_url = configuration.database_url()
    if db_url.startswith("sqlite"):
        # SQLite em memória precisa de uma única conexão compartilhada entre threads
        return create_engine(
            db_url,
            echo=configuration.db_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(db_url, echo=configuration.db_echo, pool_pre_ping=True)

engine = _build_engine()

def get_session() -> Iterator[Session]:
    """
    Dependência do FastAPI: uma sessão por requisição, sempre fechada ao final.
    """
    session = Session(engine)
    try:
        yield session
    finally:
        session.close()

@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Sessão de curta duração para uso fora das rotas (helpers, jobs).
    """
    session = Session(engine)
    try:
        yield session
    except Exception:
        session.rollback()
        logging.debug("BANCO DE DADOS >>> Rollback da sessão após erro")
        raise
    finally:
        session.close()
