"""
Catalog entities.

Plain records for the three catalog concepts. Relations are always
resolved by the gateway: a Film read from storage carries its Genre and
Director, a Genre or Director read for a detail page carries its films.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class Genre:
    """
    Film genre.

    Attributes:
        id: Internal database ID (None until persisted)
        name: Genre name (2-100 characters)
        films: Films of this genre, loaded only for detail pages
    """

    id: Optional[int] = None
    name: str = ""
    films: tuple["Film", ...] = field(default=(), compare=False, repr=False)


@dataclass
class Director:
    """
    Film director.

    Attributes:
        id: Internal database ID (None until persisted)
        name: Director full name (2-150 characters)
        country: Country of origin, optional (max 100 characters)
        films: Films of this director, loaded only for detail pages
    """

    id: Optional[int] = None
    name: str = ""
    country: Optional[str] = None
    films: tuple["Film", ...] = field(default=(), compare=False, repr=False)


@dataclass
class Film:
    """
    Catalog film.

    Attributes:
        id: Internal database ID (None until persisted)
        title: Title (1-200 characters)
        year: Release year (1895-2030)
        description: Plot summary, optional (max 2000 characters)
        rating: Rating between 1 and 10, optional
        genre_id: Reference to an existing Genre
        director_id: Reference to an existing Director
        genre: Resolved Genre when read from storage
        director: Resolved Director when read from storage
    """

    id: Optional[int] = None
    title: str = ""
    year: Optional[int] = None
    description: Optional[str] = None
    rating: Optional[Decimal] = None
    genre_id: Optional[int] = None
    director_id: Optional[int] = None
    genre: Optional[Genre] = field(default=None, compare=False)
    director: Optional[Director] = field(default=None, compare=False)


@dataclass(frozen=True)
class CatalogStatistics:
    """Number of rows in each catalog collection."""

    films: int = 0
    genres: int = 0
    directors: int = 0
