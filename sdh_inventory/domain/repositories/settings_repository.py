"""Settings lists repository interface"""
from abc import ABC, abstractmethod
from typing import List
from sdh_inventory.domain.entities.settings_list import SettingsEntry, SettingsListType


class SettingsRepository(ABC):
    """Interface for the settings lists store"""

    @abstractmethod
    async def list_values(self, list_type: SettingsListType, include_inactive: bool = False) -> List[str]:
        """Get values of one list in insertion order"""
        pass

    @abstractmethod
    async def list_all(self) -> List[SettingsEntry]:
        """Get every entry of every list, active and inactive"""
        pass

    @abstractmethod
    async def upsert_value(self, list_type: SettingsListType, value: str) -> SettingsEntry:
        """Add a value or reactivate it; idempotent"""
        pass

    @abstractmethod
    async def deactivate_value(self, list_type: SettingsListType, value: str) -> None:
        """Mark a value inactive without removing it"""
        pass

    @abstractmethod
    async def upsert_many(self, entries: List[SettingsEntry]) -> int:
        """Stage inserts or overwrites by (type, value), keeping is_active.

        Nothing is visible to other readers until ``commit``.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make staged changes permanent"""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard staged changes"""
        pass
