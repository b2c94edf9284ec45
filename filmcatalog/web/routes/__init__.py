"""Routes HTTP du catalogue : accueil, films, genres, réalisateurs."""
