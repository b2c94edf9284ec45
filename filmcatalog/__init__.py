"""FilmCatalog - gestion d'un catalogue de films, genres et realisateurs."""

__version__ = "0.1.0"
