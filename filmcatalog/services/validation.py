"""
Regles de validation des entites du catalogue.

Chaque fonction validate_* est pure : elle recoit une entite candidate
(eventuellement partielle, issue d'un formulaire) et retourne un dictionnaire
champ -> liste de messages. Un dictionnaire vide signifie que l'entite est valide.
L'entite n'est jamais modifiee.

Toutes les violations sont collectees ; seule l'absence d'un champ obligatoire
masque les controles de bornes de ce champ.
"""

from decimal import Decimal
from typing import Any, Optional

from filmcatalog.core.entities.catalog import Director, Film, Genre
from filmcatalog.core.exceptions import ValidationErrors

# Bornes (inclusives)
GENRE_NAME_LENGTH = (2, 100)
DIRECTOR_NAME_LENGTH = (2, 150)
DIRECTOR_COUNTRY_MAX_LENGTH = 100
FILM_TITLE_LENGTH = (1, 200)
FILM_DESCRIPTION_MAX_LENGTH = 2000
YEAR_MIN, YEAR_MAX = 1895, 2030
RATING_MIN, RATING_MAX = Decimal(1), Decimal(10)

# Messages affiches a l'utilisateur
GENRE_NAME_REQUIRED = "Назва жанру є обов'язковою"
GENRE_NAME_LENGTH_MESSAGE = "Назва має бути від 2 до 100 символів"
DIRECTOR_NAME_REQUIRED = "Ім'я режисера є обов'язковим"
DIRECTOR_NAME_LENGTH_MESSAGE = "Ім'я має бути від 2 до 150 символів"
DIRECTOR_COUNTRY_LENGTH_MESSAGE = "Назва країни не може перевищувати 100 символів"
FILM_TITLE_REQUIRED = "Назва є обов'язковою"
FILM_TITLE_LENGTH_MESSAGE = "Назва має бути від 1 до 200 символів"
FILM_YEAR_REQUIRED = "Рік випуску є обов'язковим"
FILM_YEAR_RANGE_MESSAGE = f"Рік має бути від {YEAR_MIN} до {YEAR_MAX}"
FILM_DESCRIPTION_LENGTH_MESSAGE = "Опис не може перевищувати 2000 символів"
FILM_RATING_RANGE_MESSAGE = "Рейтинг має бути від 1 до 10"
FILM_GENRE_REQUIRED = "Жанр є обов'язковим"
FILM_DIRECTOR_REQUIRED = "Режисер є обов'язковим"
FILM_GENRE_UNKNOWN = "Обраний жанр не існує"
FILM_DIRECTOR_UNKNOWN = "Обраного режисера не існує"


def is_blank(value: Any) -> bool:
    """Vrai si la valeur est absente (None ou chaine vide apres strip)."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def add_error(errors: ValidationErrors, field: str, message: str) -> None:
    """Ajoute un message pour un champ."""
    errors.setdefault(field, []).append(message)


def merge_errors(*mappings: Optional[ValidationErrors]) -> ValidationErrors:
    """Fusionne plusieurs dictionnaires d'erreurs en conservant l'ordre des messages."""
    merged: ValidationErrors = {}
    for mapping in mappings:
        for field, messages in (mapping or {}).items():
            for message in messages:
                if message not in merged.get(field, []):
                    add_error(merged, field, message)
    return merged


def _check_length(
    errors: ValidationErrors,
    field: str,
    value: Optional[str],
    min_length: int,
    max_length: int,
    message: str,
) -> None:
    if value is not None and not min_length <= len(value) <= max_length:
        add_error(errors, field, message)


def validate_genre(genre: Genre) -> ValidationErrors:
    """Valide un genre : nom obligatoire de 2 a 100 caracteres."""
    errors: ValidationErrors = {}
    if is_blank(genre.name):
        add_error(errors, "name", GENRE_NAME_REQUIRED)
    else:
        _check_length(errors, "name", genre.name, *GENRE_NAME_LENGTH, GENRE_NAME_LENGTH_MESSAGE)
    return errors


def validate_director(director: Director) -> ValidationErrors:
    """Valide un realisateur : nom obligatoire (2-150), pays optionnel (max 100)."""
    errors: ValidationErrors = {}
    if is_blank(director.name):
        add_error(errors, "name", DIRECTOR_NAME_REQUIRED)
    else:
        _check_length(
            errors, "name", director.name, *DIRECTOR_NAME_LENGTH, DIRECTOR_NAME_LENGTH_MESSAGE
        )
    if not is_blank(director.country):
        _check_length(
            errors,
            "country",
            director.country,
            0,
            DIRECTOR_COUNTRY_MAX_LENGTH,
            DIRECTOR_COUNTRY_LENGTH_MESSAGE,
        )
    return errors


def validate_film(film: Film) -> ValidationErrors:
    """
    Valide un film.

    Regles :
    - titre obligatoire, 1 a 200 caracteres
    - annee obligatoire, entre 1895 et 2030
    - description optionnelle, 2000 caracteres maximum
    - note optionnelle, entre 1 et 10
    - genre et realisateur obligatoires

    L'existence du genre et du realisateur n'est pas verifiee ici (pas d'acces
    au stockage) : voir FilmService.
    """
    errors: ValidationErrors = {}

    if is_blank(film.title):
        add_error(errors, "title", FILM_TITLE_REQUIRED)
    else:
        _check_length(errors, "title", film.title, *FILM_TITLE_LENGTH, FILM_TITLE_LENGTH_MESSAGE)

    if film.year is None:
        add_error(errors, "year", FILM_YEAR_REQUIRED)
    elif not YEAR_MIN <= film.year <= YEAR_MAX:
        add_error(errors, "year", FILM_YEAR_RANGE_MESSAGE)

    if not is_blank(film.description):
        _check_length(
            errors,
            "description",
            film.description,
            0,
            FILM_DESCRIPTION_MAX_LENGTH,
            FILM_DESCRIPTION_LENGTH_MESSAGE,
        )

    if film.rating is not None and not RATING_MIN <= film.rating <= RATING_MAX:
        add_error(errors, "rating", FILM_RATING_RANGE_MESSAGE)

    if film.genre_id is None:
        add_error(errors, "genre_id", FILM_GENRE_REQUIRED)
    if film.director_id is None:
        add_error(errors, "director_id", FILM_DIRECTOR_REQUIRED)

    return errors
