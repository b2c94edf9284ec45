"""
Messages de confirmation et d'erreur affichés après une redirection.

Les routes redirigent vers la liste avec ?message=<clé> ou ?error=<clé> ;
la liste traduit la clé en texte.
"""

from typing import Optional

from ..services.catalog import DIRECTOR_HAS_FILMS_MESSAGE, GENRE_HAS_FILMS_MESSAGE

SUCCESS_MESSAGES = {
    "films": {
        "created": "Фільм успішно створено!",
        "updated": "Фільм успішно оновлено!",
        "deleted": "Фільм успішно видалено!",
    },
    "genres": {
        "created": "Жанр успішно створено!",
        "updated": "Жанр успішно оновлено!",
        "deleted": "Жанр успішно видалено!",
    },
    "directors": {
        "created": "Режисера успішно створено!",
        "updated": "Режисера успішно оновлено!",
        "deleted": "Режисера успішно видалено!",
    },
}

ERROR_MESSAGES = {
    "genres": {"has_films": GENRE_HAS_FILMS_MESSAGE},
    "directors": {"has_films": DIRECTOR_HAS_FILMS_MESSAGE},
}


def flash_context(
    section: str, message: Optional[str] = None, error: Optional[str] = None
) -> dict[str, Optional[str]]:
    """Contexte de template pour les alertes ; les clés inconnues sont ignorées."""
    return {
        "success_message": SUCCESS_MESSAGES.get(section, {}).get(message or ""),
        "error_message": ERROR_MESSAGES.get(section, {}).get(error or ""),
    }
