"""
Point d'entrée CLI de FilmCatalog.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .config import Settings
from .container import Container
from .infrastructure.persistence.seed import seed_catalog
from .logging_config import configure_logging

app = typer.Typer(
    name="filmcatalog",
    help="Catalogue de films, genres et réalisateurs",
)
container = Container()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def database_engine(config: Settings) -> str:
    """Nom du moteur de base, tel qu'affiche par info et porte par les logs."""
    if config.is_sqlite:
        return "sqlite"
    return config.database_url.split(":", 1)[0].split("+", 1)[0]


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration FilmCatalog")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Moteur : {database_engine(config)}")
    typer.echo(
        f"Données de démonstration : {'activées' if config.seed_demo_data else 'désactivées'}"
    )
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"FilmCatalog v{__version__}")


@app.command(name="init-db")
def init_db() -> None:
    """Crée les tables manquantes."""
    container.database.init()
    typer.echo("Base de données initialisée")


@app.command()
def seed() -> None:
    """Charge les données de démonstration si le catalogue est vide."""
    container.database.init()
    session = container.session()
    try:
        inserted = seed_catalog(session)
    finally:
        session.close()

    if inserted:
        typer.echo("Données de démonstration chargées")
    else:
        typer.echo("Catalogue déjà rempli, rien à faire")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web FilmCatalog."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("filmcatalog.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        database_engine=database_engine(settings),
    )

    logger.info("Démarrage de FilmCatalog", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
