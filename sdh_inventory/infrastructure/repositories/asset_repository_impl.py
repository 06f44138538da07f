"""In-memory implementation of AssetRepository"""
import copy
import uuid
from datetime import datetime
from typing import Dict, List, Optional
from sdh_inventory.domain.entities.asset import Asset, EDITABLE_FIELDS
from sdh_inventory.domain.errors import DuplicateRecordError, NotFoundError
from sdh_inventory.domain.repositories.asset_repository import AssetRepository


class AssetRepositoryImpl(AssetRepository):
    """Asset repository implementation with in-memory storage.

    Stores copies so callers never share mutable state with the store.
    Inventory numbers are unique, as in the SQL store.
    """

    def __init__(self):
        self._assets: Dict[str, Asset] = {}
        self._pending: Dict[str, Asset] = {}

    def _check_inventory_number(self, asset_id: str, inventory_number: str, assets: Dict[str, Asset]) -> None:
        for other in assets.values():
            if other.id != asset_id and other.inventory_number == inventory_number:
                raise DuplicateRecordError(
                    f"An asset with inventory number '{inventory_number}' already exists"
                )

    async def create(self, asset: Asset) -> Asset:
        """Create a new asset"""
        stored = copy.deepcopy(asset)
        stored.id = str(uuid.uuid4())
        self._check_inventory_number(stored.id, stored.inventory_number, self._assets)
        stored.created_at = datetime.utcnow()
        stored.updated_at = stored.created_at
        self._assets[stored.id] = stored
        return copy.deepcopy(stored)

    async def get_by_id(self, asset_id: str) -> Optional[Asset]:
        """Get asset by ID"""
        asset = self._assets.get(asset_id)
        return copy.deepcopy(asset) if asset else None

    async def get_all(self) -> List[Asset]:
        """Get all assets, newest first"""
        return [copy.deepcopy(asset) for asset in reversed(list(self._assets.values()))]

    async def update(self, asset_id: str, fields: dict) -> Asset:
        """Overwrite the given fields of an asset"""
        asset = self._assets.get(asset_id)
        if asset is None:
            raise NotFoundError(f"Asset with ID '{asset_id}' not found")
        if "inventory_number" in fields:
            self._check_inventory_number(asset_id, fields["inventory_number"], self._assets)

        for field_name, value in fields.items():
            if field_name in EDITABLE_FIELDS:
                setattr(asset, field_name, value)
        asset.updated_at = datetime.utcnow()
        return copy.deepcopy(asset)

    async def set_deleted_flag(self, asset_id: str, is_deleted: bool) -> None:
        """Set the soft-delete flag"""
        asset = self._assets.get(asset_id)
        if asset is None:
            raise NotFoundError(f"Asset with ID '{asset_id}' not found")
        asset.is_deleted = is_deleted
        asset.updated_at = datetime.utcnow()

    async def delete(self, asset_id: str) -> bool:
        """Permanently remove an asset"""
        if asset_id not in self._assets:
            return False
        del self._assets[asset_id]
        return True

    async def upsert_many(self, assets: List[Asset]) -> int:
        """Stage inserts or overwrites by id"""
        for asset in assets:
            merged = {**self._assets, **self._pending}
            try:
                self._check_inventory_number(asset.id, asset.inventory_number, merged)
            except DuplicateRecordError:
                self._pending.clear()
                raise
            self._pending[asset.id] = copy.deepcopy(asset)
        return len(assets)

    async def commit(self) -> None:
        """Apply staged assets"""
        self._assets.update(self._pending)
        self._pending.clear()

    async def rollback(self) -> None:
        """Drop staged assets"""
        self._pending.clear()
