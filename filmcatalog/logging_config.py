"""
Configuration du logging de FilmCatalog via loguru.

Deux sorties :
- console : lisible, colorée, préfixée par le nom de l'application
- fichier : JSON avec rotation, chaque ligne porte le contexte du catalogue
  (application, moteur de base) en plus des champs passés au logger
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

APP_NAME = "filmcatalog"

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[app]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/filmcatalog.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    database_engine: Optional[str] = None,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON, toujours alimenté à partir de DEBUG
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
        database_engine : Moteur de base ("sqlite", ...) ajouté au contexte
    """
    logger.remove()
    # Contexte commun à toutes les lignes ; les appels peuvent le compléter
    logger.configure(extra={"app": APP_NAME, "database": database_engine or "unknown"})

    logger.add(sys.stderr, level=log_level, format=_CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging du catalogue configuré", log_file=str(log_file), level=log_level)
