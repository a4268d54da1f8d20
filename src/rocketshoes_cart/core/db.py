"""Engine e SessionFactory do SQLAlchemy 2 para o blob do carrinho."""
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from ..repo.models import Base

def create_session_factory(database_url: str, create_schema: bool = True):
    """Cria SessionFactory síncrona.

    As gravações podem sair de uma thread de trabalho (asyncio.to_thread), por
    isso conexões SQLite são abertas com check_same_thread=False.

    :param database_url: URL completa do banco (ex.: sqlite:///rocketshoes_cart.db).
    :param create_schema: cria a tabela cart_state se ainda não existir.
    :return: sessionmaker configurado.
    """
    connect_args = {}
    if make_url(database_url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)
    if create_schema:
        Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
