"""
Tests des entites du catalogue.

Verifie les valeurs par defaut et la comparaison : les relations resolues
(genre, director, films) n'entrent pas dans l'egalite.
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from filmcatalog.core.entities import CatalogStatistics, Director, Film, Genre


class TestGenre:
    def test_defaults(self):
        genre = Genre()
        assert genre.id is None
        assert genre.name == ""
        assert genre.films == ()

    def test_films_ignored_in_equality(self):
        film = Film(id=1, title="Дюна", year=2021, genre_id=4, director_id=5)
        assert Genre(id=4, name="Фантастика", films=(film,)) == Genre(id=4, name="Фантастика")


class TestDirector:
    def test_country_optional(self):
        director = Director(name="Невідомий Режисер")
        assert director.country is None
        assert director.films == ()


class TestFilm:
    def test_defaults(self):
        film = Film()
        assert film.id is None
        assert film.year is None
        assert film.rating is None
        assert film.genre is None
        assert film.director is None

    def test_resolved_relations_ignored_in_equality(self):
        bare = Film(id=1, title="Інтерстеллар", year=2014, rating=Decimal("8.7"), genre_id=4, director_id=1)
        resolved = Film(
            id=1,
            title="Інтерстеллар",
            year=2014,
            rating=Decimal("8.70"),
            genre_id=4,
            director_id=1,
            genre=Genre(id=4, name="Фантастика"),
            director=Director(id=1, name="Крістофер Нолан"),
        )
        assert bare == resolved


class TestCatalogStatistics:
    def test_is_immutable(self):
        stats = CatalogStatistics(films=5, genres=6, directors=5)
        with pytest.raises(FrozenInstanceError):
            stats.films = 0
