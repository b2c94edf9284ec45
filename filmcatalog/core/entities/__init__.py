"""
Business entities representing core domain concepts.

Exports:
- Genre: A film genre
- Director: A film director
- Film: A catalog film referencing one genre and one director
- CatalogStatistics: Counts displayed on the home page
"""

from filmcatalog.core.entities.catalog import CatalogStatistics, Director, Film, Genre

__all__ = [
    "Genre",
    "Director",
    "Film",
    "CatalogStatistics",
]
