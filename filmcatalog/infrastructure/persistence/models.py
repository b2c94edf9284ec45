"""
Modeles SQLModel pour la base de donnees FilmCatalog.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/).

Tables:
- genres: Genres de films
- directors: Realisateurs
- films: Films, references vers genres et directors (ON DELETE RESTRICT)

Les longueurs maximales reprennent les regles de validation ; la validation
elle-meme est faite avant l'ecriture (services/validation.py).
"""

from decimal import Decimal

from sqlmodel import Field, SQLModel


class GenreModel(SQLModel, table=True):
    """Modele representant un genre."""

    __tablename__ = "genres"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)


class DirectorModel(SQLModel, table=True):
    """Modele representant un realisateur."""

    __tablename__ = "directors"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=150)
    country: str | None = Field(default=None, max_length=100)


class FilmModel(SQLModel, table=True):
    """
    Modele representant un film.

    La suppression d'un genre ou d'un realisateur encore reference est
    refusee par la base (RESTRICT) ; la note est stockee en NUMERIC(4, 2).
    """

    __tablename__ = "films"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=200, index=True)
    year: int
    description: str | None = Field(default=None, max_length=2000)
    rating: Decimal | None = Field(default=None, max_digits=4, decimal_places=2)
    genre_id: int = Field(foreign_key="genres.id", index=True, ondelete="RESTRICT")
    director_id: int = Field(
        foreign_key="directors.id", index=True, ondelete="RESTRICT"
    )
