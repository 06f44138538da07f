"""SQL implementation of SettingsRepository"""
import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sdh_inventory.domain.entities.settings_list import SettingsEntry, SettingsListType
from sdh_inventory.domain.errors import NotFoundError, PersistenceError
from sdh_inventory.domain.repositories.settings_repository import SettingsRepository
from sdh_inventory.infrastructure.database.models import SettingsEntryModel

logger = logging.getLogger(__name__)


class SettingsRepositoryDB(SettingsRepository):
    """SQL implementation of SettingsRepository"""

    def __init__(self, db: Session):
        self.db = db

    def _model_to_entity(self, model: SettingsEntryModel) -> SettingsEntry:
        """Convert SettingsEntryModel to SettingsEntry entity"""
        return SettingsEntry(
            id=str(model.id),
            type=SettingsListType(model.type.value) if hasattr(model.type, "value") else SettingsListType(model.type),
            value=model.value,
            is_active=bool(model.is_active),
            created_at=model.created_at,
        )

    def _find(self, list_type: SettingsListType, value: str) -> Optional[SettingsEntryModel]:
        return (
            self.db.query(SettingsEntryModel)
            .filter(SettingsEntryModel.type == list_type, SettingsEntryModel.value == value)
            .first()
        )

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Settings store failed to %s: %s", action, e)
            raise PersistenceError(f"Failed to {action}: {e}") from e

    async def list_values(self, list_type: SettingsListType, include_inactive: bool = False) -> List[str]:
        """Get values of one list in insertion order"""
        query = self.db.query(SettingsEntryModel).filter(SettingsEntryModel.type == list_type)
        if not include_inactive:
            query = query.filter(SettingsEntryModel.is_active.is_(True))
        models = query.order_by(SettingsEntryModel.created_at.asc()).all()
        return [model.value for model in models]

    async def list_all(self) -> List[SettingsEntry]:
        """Get every entry of every list"""
        models = (
            self.db.query(SettingsEntryModel)
            .order_by(SettingsEntryModel.type.asc(), SettingsEntryModel.created_at.asc())
            .all()
        )
        return [self._model_to_entity(model) for model in models]

    async def upsert_value(self, list_type: SettingsListType, value: str) -> SettingsEntry:
        """Add a value or reactivate it"""
        model = self._find(list_type, value)
        if model is None:
            model = SettingsEntryModel(type=list_type, value=value, is_active=True)
            self.db.add(model)
        else:
            model.is_active = True
        self._commit("save settings value")
        self.db.refresh(model)
        return self._model_to_entity(model)

    async def deactivate_value(self, list_type: SettingsListType, value: str) -> None:
        """Mark a value inactive"""
        model = self._find(list_type, value)
        if model is None:
            raise NotFoundError(f"Value '{value}' not found in list {list_type.value}")
        model.is_active = False
        self._commit("deactivate settings value")

    async def upsert_many(self, entries: List[SettingsEntry]) -> int:
        """Stage inserts or overwrites by (type, value); ``commit`` ends the transaction"""
        try:
            for entry in entries:
                model = self._find(entry.type, entry.value)
                if model is None:
                    self.db.add(SettingsEntryModel(
                        type=entry.type,
                        value=entry.value,
                        is_active=entry.is_active,
                        created_at=entry.created_at,
                    ))
                    # Later entries may repeat this (type, value)
                    self.db.flush()
                else:
                    model.is_active = entry.is_active
            self.db.flush()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to restore settings: {e}") from e
        return len(entries)

    async def commit(self) -> None:
        """Commit the session"""
        self._commit("save settings")

    async def rollback(self) -> None:
        """Roll the session back"""
        self.db.rollback()
