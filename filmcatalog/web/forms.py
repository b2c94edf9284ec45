"""
Conversion des formulaires HTML en entités candidates.

Les valeurs brutes sont des chaînes : elles sont nettoyées (strip, chaîne vide
-> None) puis converties. Une valeur numérique illisible devient None et
produit un message de saisie pour le champ ; ces messages sont fusionnés avec
ceux de la validation par les services.

Les fonctions *_to_form font le chemin inverse pour pré-remplir les
formulaires d'édition.
"""

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.entities.catalog import Director, Film, Genre
from ..core.exceptions import ValidationErrors
from ..services.validation import add_error
from .deps import format_rating


def _invalid_value(raw: str) -> str:
    return f"Значення '{raw}' некоректне"


def clean(value: Any) -> Optional[str]:
    """Retourne la chaîne sans espaces autour, ou None si vide."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def parse_int(
    form: Mapping[str, Any], key: str, errors: ValidationErrors
) -> Optional[int]:
    """Lit un entier ; une valeur illisible est signalée dans errors."""
    raw = clean(form.get(key))
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        add_error(errors, key, _invalid_value(raw))
        return None


def parse_decimal(
    form: Mapping[str, Any], key: str, errors: ValidationErrors
) -> Optional[Decimal]:
    """Lit un décimal ('.' ou ',' comme séparateur) ; une valeur illisible est signalée."""
    raw = clean(form.get(key))
    if raw is None:
        return None
    try:
        value = Decimal(raw.replace(",", "."))
    except InvalidOperation:
        value = None
    if value is None or not value.is_finite():
        add_error(errors, key, _invalid_value(raw))
        return None
    return value


def bind_genre(form: Mapping[str, Any]) -> tuple[Genre, ValidationErrors]:
    """Construit un Genre candidat depuis le formulaire."""
    return Genre(name=clean(form.get("name")) or ""), {}


def bind_director(form: Mapping[str, Any]) -> tuple[Director, ValidationErrors]:
    """Construit un Director candidat depuis le formulaire (pays vide -> None)."""
    director = Director(
        name=clean(form.get("name")) or "",
        country=clean(form.get("country")),
    )
    return director, {}


def bind_film(form: Mapping[str, Any]) -> tuple[Film, ValidationErrors]:
    """Construit un Film candidat depuis le formulaire et les erreurs de saisie."""
    errors: ValidationErrors = {}
    film = Film(
        title=clean(form.get("title")) or "",
        year=parse_int(form, "year", errors),
        description=clean(form.get("description")),
        rating=parse_decimal(form, "rating", errors),
        genre_id=parse_int(form, "genre_id", errors),
        director_id=parse_int(form, "director_id", errors),
    )
    return film, errors


def genre_to_form(genre: Genre) -> dict[str, str]:
    return {"name": genre.name}


def director_to_form(director: Director) -> dict[str, str]:
    return {"name": director.name, "country": director.country or ""}


def film_to_form(film: Film) -> dict[str, str]:
    return {
        "title": film.title,
        "year": str(film.year) if film.year is not None else "",
        "description": film.description or "",
        "rating": format_rating(film.rating),
        "genre_id": str(film.genre_id) if film.genre_id is not None else "",
        "director_id": str(film.director_id) if film.director_id is not None else "",
    }
