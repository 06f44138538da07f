"""Asset repository interface"""
from abc import ABC, abstractmethod
from typing import List, Optional
from sdh_inventory.domain.entities.asset import Asset


class AssetRepository(ABC):
    """Interface for the asset store.

    Implementations assign ids on ``create`` and report a missing id on
    ``update`` and ``set_deleted_flag`` with ``NotFoundError`` instead of
    silently succeeding. Write failures surface as ``PersistenceError``.
    """

    @abstractmethod
    async def create(self, asset: Asset) -> Asset:
        """Insert a new asset and return it with its store-assigned id"""
        pass

    @abstractmethod
    async def get_by_id(self, asset_id: str) -> Optional[Asset]:
        """Get asset by ID, deleted or not"""
        pass

    @abstractmethod
    async def get_all(self) -> List[Asset]:
        """Get all assets, active and deleted, newest first"""
        pass

    @abstractmethod
    async def update(self, asset_id: str, fields: dict) -> Asset:
        """Overwrite the given fields of an asset"""
        pass

    @abstractmethod
    async def set_deleted_flag(self, asset_id: str, is_deleted: bool) -> None:
        """Set the soft-delete flag"""
        pass

    @abstractmethod
    async def delete(self, asset_id: str) -> bool:
        """Permanently remove an asset"""
        pass

    @abstractmethod
    async def upsert_many(self, assets: List[Asset]) -> int:
        """Stage inserts or overwrites by id, keeping ids and flags.

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
