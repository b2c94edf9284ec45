"""
Fixtures pytest partagees pour les tests FilmCatalog.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine SQLite en memoire (cles etrangeres actives) et session
- Passerelle du catalogue, vide ou chargee avec les donnees de reference
- Client HTTP FastAPI branche sur la base en memoire
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel

from filmcatalog.config import Settings
from filmcatalog.infrastructure.persistence import models  # noqa: F401
from filmcatalog.infrastructure.persistence.database import (
    create_catalog_engine,
    set_engine,
)
from filmcatalog.infrastructure.persistence.repositories import SQLModelCatalogGateway
from filmcatalog.infrastructure.persistence.seed import seed_catalog
from filmcatalog.web.app import create_app


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec les tables du catalogue."""
    engine = create_catalog_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel sur la base en memoire."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def gateway(session: Session) -> SQLModelCatalogGateway:
    """Passerelle sur une base vide."""
    return SQLModelCatalogGateway(session)


@pytest.fixture
def seeded_gateway(session: Session) -> SQLModelCatalogGateway:
    """
    Passerelle sur une base chargee avec les donnees de reference.

    6 genres, 5 realisateurs, 5 films (voir infrastructure/persistence/seed.py).
    """
    seed_catalog(session)
    return SQLModelCatalogGateway(session)


def _client(engine: Engine, monkeypatch: pytest.MonkeyPatch, seed: bool) -> Iterator[TestClient]:
    monkeypatch.setenv("FILMCATALOG_SEED_DEMO_DATA", "true" if seed else "false")
    set_engine(engine)
    try:
        # Le contexte declenche le lifespan : init_db puis chargement initial
        with TestClient(create_app()) as client:
            yield client
    finally:
        set_engine(None)


@pytest.fixture
def client(engine: Engine, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """Client HTTP sur une base chargee avec les donnees de reference."""
    yield from _client(engine, monkeypatch, seed=True)


@pytest.fixture
def empty_client(engine: Engine, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """Client HTTP sur une base vide."""
    yield from _client(engine, monkeypatch, seed=False)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base et log dans un repertoire temporaire."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        seed_demo_data=False,
        log_file=tmp_path / "test.log",
    )
