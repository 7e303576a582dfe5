import logging
from sqlmodel import SQLModel

from app.database.connection import engine


def init_db():
    """Cria as tabelas que ainda não existem. Não insere dados."""
    import app.models  # noqa: F401  registra as tabelas no metadata

    SQLModel.metadata.create_all(engine)
    logging.info("BANCO DE DADOS >>> Tabelas verificadas/criadas com sucesso")
