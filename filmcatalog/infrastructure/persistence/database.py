"""
Configuration de la base de donnees SQLite pour FilmCatalog.

Ce module fournit :
- Engine SQLite avec configuration pour multi-thread et cles etrangeres actives
- Session factory avec context manager
- Fonction d'initialisation des tables

La base de donnees est configuree via FILMCATALOG_DATABASE_URL
(defaut: sqlite:///data/filmcatalog.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine, event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """Active le controle des cles etrangeres (desactive par defaut sous SQLite)."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_catalog_engine(db_url: str, echo: bool = False) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Pour SQLite :
    - le repertoire parent d'un fichier est cree si necessaire
    - une base en memoire partage une connexion unique (StaticPool)
    - PRAGMA foreign_keys=ON est execute a chaque connexion
    """
    if not db_url.startswith("sqlite"):
        return create_engine(db_url, echo=echo, pool_pre_ping=True)

    in_memory = db_url in ("sqlite://", "sqlite:///:memory:")
    if not in_memory and db_url.startswith("sqlite:///"):
        db_path = Path(db_url.replace("sqlite:///", "", 1))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if in_memory:
        kwargs["poolclass"] = StaticPool

    engine = create_engine(db_url, echo=echo, **kwargs)
    event.listen(engine, "connect", _enable_foreign_keys)
    return engine


def get_engine() -> Engine:
    """
    Retourne l'engine, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from filmcatalog.config import Settings

        settings = Settings()
        _engine = create_catalog_engine(settings.database_url)
    return _engine


def set_engine(engine: Optional[Engine]) -> None:
    """Remplace l'engine global (None force la recreation depuis la configuration)."""
    global _engine
    _engine = engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session())
        try:
            # operations
        finally:
            session.close()

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(get_engine()) as session:
        yield session


def init_db() -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables manquantes.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import ici pour eviter les imports circulaires
    from filmcatalog.infrastructure.persistence import models  # noqa: F401

    engine = get_engine()
    SQLModel.metadata.create_all(engine)
    logger.debug("Tables du catalogue pretes", url=str(engine.url))
