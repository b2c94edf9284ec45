"""
Tests de la CLI typer.
"""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from filmcatalog import __version__
from filmcatalog.config import Settings
from filmcatalog.infrastructure.persistence.database import set_engine
from filmcatalog.main import app, database_engine, main

runner = CliRunner()


@pytest.fixture
def cli_engine(engine):
    """Branche la CLI sur la base en memoire."""
    set_engine(engine)
    yield engine
    set_engine(None)


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"FilmCatalog v{__version__}" in result.output


def test_info():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "Base de données" in result.output
    assert "Moteur : sqlite" in result.output
    assert "Niveau de log" in result.output


def test_init_db(cli_engine):
    result = runner.invoke(app, ["init-db"])
    assert result.exit_code == 0
    assert "initialisée" in result.output


def test_seed_then_noop(cli_engine):
    first = runner.invoke(app, ["seed"])
    assert first.exit_code == 0
    assert "Données de démonstration chargées" in first.output

    second = runner.invoke(app, ["seed"])
    assert second.exit_code == 0
    assert "déjà rempli" in second.output


def test_serve_runs_uvicorn():
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "9000"])
    assert result.exit_code == 0
    mock_run.assert_called_once_with(
        "filmcatalog.web.app:app", host="127.0.0.1", port=9000, reload=False
    )


def test_main_configures_logging_then_runs_cli():
    with patch("filmcatalog.main.configure_logging") as mock_logging, patch(
        "filmcatalog.main.app"
    ) as mock_app:
        main()
    mock_logging.assert_called_once()
    assert mock_logging.call_args.kwargs["database_engine"] == "sqlite"
    mock_app.assert_called_once_with()


@pytest.mark.parametrize(
    "url,expected",
    [
        ("sqlite:///data/filmcatalog.db", "sqlite"),
        ("sqlite://", "sqlite"),
        ("postgresql+psycopg://user@host/films", "postgresql"),
        ("mysql://host/films", "mysql"),
    ],
)
def test_database_engine(url, expected):
    assert database_engine(Settings(database_url=url)) == expected
