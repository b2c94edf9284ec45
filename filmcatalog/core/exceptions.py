"""
Exceptions du domaine catalogue.

Toutes les erreurs métier héritent de CatalogError pour que la couche web
puisse les intercepter uniformément. Chaque famille correspond à une
présentation différente :
- ValidationFailedError : formulaire réaffiché avec les messages par champ
- EntityNotFoundError : page 404
- DependencyConflictError : suppression refusée, message d'erreur sur la liste
"""

from typing import Optional


ValidationErrors = dict[str, list[str]]


class CatalogError(Exception):
    """Classe de base des erreurs du catalogue."""


class ValidationFailedError(CatalogError):
    """Une ou plusieurs règles de validation ne sont pas respectées."""

    def __init__(self, errors: ValidationErrors) -> None:
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Validation échouée : {fields}")


class EntityNotFoundError(CatalogError):
    """L'identifiant demandé ne correspond à aucune entité."""

    def __init__(self, entity: str, entity_id: Optional[int]) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} introuvable")


class DependencyConflictError(CatalogError):
    """Suppression refusée : des films référencent encore l'entité."""

    def __init__(
        self, entity: str, entity_id: int, message: str, dependents: int = 0
    ) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.message = message
        self.dependents = dependents
        super().__init__(message)
