from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Declarative base para los modelos
Base = declarative_base()


def make_engine(database_url: str):
    # SQLite in-memory databases live inside one connection, share it across threads
    if database_url == "sqlite://" or (database_url.startswith("sqlite") and ":memory:" in database_url):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(database_url, pool_pre_ping=True)


def make_session_factory(engine):
    # Configuración de la sesión para interactuar con la base de datos
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine):
    # the tables have to be registered on Base before create_all
    from airport_ops import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
