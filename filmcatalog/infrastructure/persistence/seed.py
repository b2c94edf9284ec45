"""
Donnees de reference du catalogue.

Le jeu de donnees initial (6 genres, 5 realisateurs, 5 films) n'est charge que
si la base est vide ; l'operation peut donc etre relancee sans effet.
"""

from decimal import Decimal

from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, select

from filmcatalog.infrastructure.persistence.models import (
    DirectorModel,
    FilmModel,
    GenreModel,
)

SEED_GENRES = (
    (1, "Драма"),
    (2, "Комедія"),
    (3, "Бойовик"),
    (4, "Фантастика"),
    (5, "Трилер"),
    (6, "Жахи"),
)

SEED_DIRECTORS = (
    (1, "Крістофер Нолан", "Велика Британія"),
    (2, "Квентін Тарантіно", "США"),
    (3, "Стівен Спілберг", "США"),
    (4, "Мартін Скорсезе", "США"),
    (5, "Дені Вільньов", "Канада"),
)

# (id, titre, annee, description, note, genre_id, director_id)
SEED_FILMS = (
    (1, "Інтерстеллар", 2014, "Науково-фантастичний фільм про подорож крізь чорну діру", Decimal("8.7"), 4, 1),
    (2, "Кримінальне чтиво", 1994, "Культовий кримінальний фільм", Decimal("8.9"), 5, 2),
    (3, "Список Шіндлера", 1993, "Історична драма про Голокост", Decimal("9.0"), 1, 3),
    (4, "Початок", 2010, "Фільм про сни всередині снів", Decimal("8.8"), 4, 1),
    (5, "Дюна", 2021, "Екранізація знаменитого роману", Decimal("8.0"), 4, 5),
)


def _is_empty(session: Session) -> bool:
    for model in (GenreModel, DirectorModel, FilmModel):
        if session.exec(select(func.count()).select_from(model)).one():
            return False
    return True


def seed_catalog(session: Session) -> bool:
    """
    Charge les donnees de reference si les trois tables sont vides.

    Args :
        session : Session SQLModel active

    Retourne :
        True si les donnees ont ete inserees, False si la base contenait deja des lignes
    """
    if not _is_empty(session):
        logger.debug("Catalogue deja rempli, chargement initial ignore")
        return False

    session.add_all(GenreModel(id=genre_id, name=name) for genre_id, name in SEED_GENRES)
    session.add_all(
        DirectorModel(id=director_id, name=name, country=country)
        for director_id, name, country in SEED_DIRECTORS
    )
    # Les genres et realisateurs doivent exister avant les films (cles etrangeres)
    session.flush()
    session.add_all(
        FilmModel(
            id=film_id,
            title=title,
            year=year,
            description=description,
            rating=rating,
            genre_id=genre_id,
            director_id=director_id,
        )
        for film_id, title, year, description, rating, genre_id, director_id in SEED_FILMS
    )
    session.commit()

    logger.info(
        "Donnees de reference chargees",
        genres=len(SEED_GENRES),
        directors=len(SEED_DIRECTORS),
        films=len(SEED_FILMS),
    )
    return True
