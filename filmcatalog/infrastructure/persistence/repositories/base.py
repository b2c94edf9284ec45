"""
Outils communs aux repositories SQLModel.
"""

from sqlalchemy import func
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, SQLModel, select

from filmcatalog.core.exceptions import EntityNotFoundError

# Bornes d'un INTEGER SQLite ; un ID hors bornes ne peut designer aucune ligne
SQLITE_INTEGER_MIN, SQLITE_INTEGER_MAX = -(2**63), 2**63 - 1


def storable_id(entity_id: int) -> bool:
    """Vrai si l'ID peut etre passe a la base sans depassement."""
    return SQLITE_INTEGER_MIN <= entity_id <= SQLITE_INTEGER_MAX


class SQLModelRepository:
    """
    Base des repositories : session partagee, comptage et commit des mises a jour.

    Les sous-classes definissent `model` (table SQLModel) et `entity_name`
    (nom utilise dans les erreurs et les logs).
    """

    model: type[SQLModel]
    entity_name: str

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def exists(self, entity_id: int) -> bool:
        """Verifie l'existence d'une ligne par son ID."""
        if not storable_id(entity_id):
            return False
        statement = select(self.model.id).where(self.model.id == entity_id)
        return self._session.exec(statement).first() is not None

    def count(self) -> int:
        """Nombre total de lignes de la table."""
        return self._session.exec(select(func.count()).select_from(self.model)).one()

    def _commit_update(self, entity_id: int) -> None:
        """
        Commit d'une mise a jour.

        Si la ligne a disparu entre le chargement et l'ecriture, la mise a jour
        est traitee comme un identifiant inconnu ; tout autre conflit remonte.
        """
        try:
            self._session.commit()
        except StaleDataError:
            self._session.rollback()
            if not self.exists(entity_id):
                raise EntityNotFoundError(self.entity_name, entity_id) from None
            raise

    def delete(self, entity_id: int) -> bool:
        """Supprime une ligne par ID. Retourne True si supprimee."""
        if not storable_id(entity_id):
            return False
        model = self._session.get(self.model, entity_id)
        if model is None:
            return False
        self._session.delete(model)
        self._session.commit()
        return True
