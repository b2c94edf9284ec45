"""
Tests de la configuration de l'engine SQLite.
"""

from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from filmcatalog.infrastructure.persistence import database
from filmcatalog.infrastructure.persistence.database import (
    create_catalog_engine,
    get_engine,
    get_session,
    set_engine,
)


class TestCreateCatalogEngine:
    def test_foreign_keys_enabled(self, engine):
        with engine.connect() as connection:
            assert connection.execute(text("PRAGMA foreign_keys")).scalar() == 1

    def test_in_memory_uses_static_pool(self):
        engine = create_catalog_engine("sqlite:///:memory:")
        assert isinstance(engine.pool, StaticPool)
        engine.dispose()

    def test_file_database_creates_parent_directory(self, tmp_path):
        db_path = tmp_path / "nested" / "catalog.db"
        engine = create_catalog_engine(f"sqlite:///{db_path}")
        assert db_path.parent.is_dir()
        with engine.connect() as connection:
            assert connection.execute(text("PRAGMA foreign_keys")).scalar() == 1
        engine.dispose()


class TestGlobalEngine:
    def test_set_engine_overrides_global(self, engine):
        set_engine(engine)
        try:
            assert get_engine() is engine
            session = next(get_session())
            try:
                assert session.get_bind() is engine
            finally:
                session.close()
        finally:
            set_engine(None)
        assert database._engine is None

    def test_get_engine_uses_settings(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FILMCATALOG_DATABASE_URL", f"sqlite:///{tmp_path}/env.db")
        set_engine(None)
        try:
            assert str(get_engine().url).endswith("env.db")
        finally:
            get_engine().dispose()
            set_engine(None)
