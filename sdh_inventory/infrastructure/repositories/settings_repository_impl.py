"""In-memory implementation of SettingsRepository"""
import uuid
from dataclasses import replace
from typing import Dict, List, Tuple
from sdh_inventory.domain.entities.settings_list import SettingsEntry, SettingsListType
from sdh_inventory.domain.errors import NotFoundError
from sdh_inventory.domain.repositories.settings_repository import SettingsRepository


class SettingsRepositoryImpl(SettingsRepository):
    """Settings repository implementation with in-memory storage"""

    def __init__(self):
        self._entries: Dict[Tuple[SettingsListType, str], SettingsEntry] = {}
        self._pending: List[SettingsEntry] = []

    async def list_values(self, list_type: SettingsListType, include_inactive: bool = False) -> List[str]:
        """Get values of one list in insertion order"""
        return [
            entry.value for (entry_type, _), entry in self._entries.items()
            if entry_type == list_type and (include_inactive or entry.is_active)
        ]

    async def list_all(self) -> List[SettingsEntry]:
        """Get every entry of every list"""
        return [replace(entry) for entry in self._entries.values()]

    async def upsert_value(self, list_type: SettingsListType, value: str) -> SettingsEntry:
        """Add a value or reactivate it"""
        key = (list_type, value)
        entry = self._entries.get(key)
        if entry is None:
            entry = SettingsEntry(id=str(uuid.uuid4()), type=list_type, value=value)
            self._entries[key] = entry
        else:
            entry.is_active = True
        return replace(entry)

    async def deactivate_value(self, list_type: SettingsListType, value: str) -> None:
        """Mark a value inactive"""
        entry = self._entries.get((list_type, value))
        if entry is None:
            raise NotFoundError(f"Value '{value}' not found in list {list_type.value}")
        entry.is_active = False

    async def upsert_many(self, entries: List[SettingsEntry]) -> int:
        """Stage inserts or overwrites by (type, value)"""
        self._pending.extend(replace(entry) for entry in entries)
        return len(entries)

    async def commit(self) -> None:
        """Apply staged entries"""
        for entry in self._pending:
            key = (entry.type, entry.value)
            existing = self._entries.get(key)
            if existing is None:
                self._entries[key] = replace(entry, id=entry.id or str(uuid.uuid4()))
            else:
                existing.is_active = entry.is_active
        self._pending.clear()

    async def rollback(self) -> None:
        """Drop staged entries"""
        self._pending.clear()
