"""Asset lifecycle use cases

Every write to an asset goes through ``AssetUseCases``: it validates user
edits before they reach the store and is the only writer of ``is_deleted``.

States: Active -> (soft delete) -> Deleted -> (restore) -> Active, and
Deleted -> (purge) -> gone. Purging an active asset is refused.
"""
import logging
from decimal import Decimal
from typing import List, Optional
from sdh_inventory.domain.entities.asset import Asset, EDITABLE_FIELDS, field_errors
from sdh_inventory.domain.entities.settings_list import InventoryVocabulary
from sdh_inventory.domain.errors import NotFoundError, ValidationError
from sdh_inventory.domain.repositories.asset_repository import AssetRepository
from sdh_inventory.application.dto.asset_dto import (
    AssetCreateDTO,
    AssetUpdateDTO,
    AssetResponseDTO,
    AssetSummaryDTO,
)

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "ALL"


class AssetUseCases:
    """Use cases for asset operations"""

    def __init__(
        self,
        asset_repository: AssetRepository,
        vocabulary: Optional[InventoryVocabulary] = None,
        strict_vocabulary: bool = False,
    ):
        self.asset_repository = asset_repository
        self.vocabulary = vocabulary or InventoryVocabulary()
        self.strict_vocabulary = strict_vocabulary

    async def create_asset(self, asset_data: AssetCreateDTO) -> AssetResponseDTO:
        """Validate and store a new asset"""
        fields = self._normalize(asset_data.model_dump())
        self._validate(fields, changed=fields.keys())

        asset = Asset(id="", is_deleted=False, **fields)
        created = await self.asset_repository.create(asset)
        logger.info("Asset %s created (%s)", created.id, created.inventory_number)
        return self._asset_to_dto(created)

    async def get_asset(self, asset_id: str) -> Optional[AssetResponseDTO]:
        """Get asset by ID, deleted or not"""
        asset = await self.asset_repository.get_by_id(asset_id)
        if not asset:
            return None
        return self._asset_to_dto(asset)

    async def list_active_assets(self) -> List[AssetResponseDTO]:
        """Assets not in the trash"""
        assets = await self.asset_repository.get_all()
        return [self._asset_to_dto(asset) for asset in assets if asset.is_active]

    async def list_deleted_assets(self) -> List[AssetResponseDTO]:
        """Assets in the trash"""
        assets = await self.asset_repository.get_all()
        return [self._asset_to_dto(asset) for asset in assets if asset.is_deleted]

    async def search_assets(
        self, search: Optional[str] = None, category: Optional[str] = None
    ) -> List[AssetResponseDTO]:
        """Active assets whose name or inventory number contains ``search``,
        optionally limited to one category"""
        term = (search or "").strip().lower()
        assets = await self.list_active_assets()
        return [
            asset for asset in assets
            if (not term or term in asset.name.lower() or term in asset.inventory_number.lower())
            and (not category or category == ALL_CATEGORIES or asset.category == category)
        ]

    async def get_summary(self) -> AssetSummaryDTO:
        """Number and total price of active assets"""
        assets = await self.list_active_assets()
        total = sum((asset.price for asset in assets), Decimal("0"))
        return AssetSummaryDTO(count=len(assets), total_value=total)

    async def update_asset(self, asset_id: str, asset_data: AssetUpdateDTO) -> AssetResponseDTO:
        """Overwrite the fields explicitly present in ``asset_data``"""
        existing = await self.asset_repository.get_by_id(asset_id)
        if not existing:
            raise NotFoundError(f"Asset with ID '{asset_id}' not found")

        changes = self._normalize(asset_data.model_dump(exclude_unset=True))
        if not changes:
            return self._asset_to_dto(existing)

        merged = {name: getattr(existing, name) for name in EDITABLE_FIELDS}
        merged.update(changes)
        self._validate(merged, changed=changes.keys())

        updated = await self.asset_repository.update(asset_id, changes)
        logger.info("Asset %s updated: %s", asset_id, ", ".join(sorted(changes)))
        return self._asset_to_dto(updated)

    async def soft_delete_asset(self, asset_id: str) -> None:
        """Move an asset to the trash; deleting a deleted asset is a no-op"""
        await self._set_deleted(asset_id, True)

    async def restore_asset(self, asset_id: str) -> None:
        """Take an asset out of the trash; restoring an active asset is a no-op"""
        await self._set_deleted(asset_id, False)

    async def purge_asset(self, asset_id: str) -> AssetResponseDTO:
        """Permanently remove an asset from the trash and return its last state"""
        asset = await self.asset_repository.get_by_id(asset_id)
        if not asset:
            raise NotFoundError(f"Asset with ID '{asset_id}' not found")
        if asset.is_active:
            raise ValidationError(
                f"Asset '{asset.inventory_number}' must be moved to the trash before it can be purged"
            )

        if not await self.asset_repository.delete(asset_id):
            raise NotFoundError(f"Asset with ID '{asset_id}' not found")
        logger.info("Asset %s purged (%s)", asset_id, asset.inventory_number)
        return self._asset_to_dto(asset)

    async def _set_deleted(self, asset_id: str, is_deleted: bool) -> None:
        asset = await self.asset_repository.get_by_id(asset_id)
        if not asset:
            raise NotFoundError(f"Asset with ID '{asset_id}' not found")
        if asset.is_deleted == is_deleted:
            return

        await self.asset_repository.set_deleted_flag(asset_id, is_deleted)
        logger.info("Asset %s %s", asset_id, "moved to trash" if is_deleted else "restored")

    def _normalize(self, fields: dict) -> dict:
        """Strip surrounding whitespace from text values"""
        normalized = {}
        for name, value in fields.items():
            if isinstance(value, str):
                value = value.strip()
            normalized[name] = value
        return normalized

    def _validate(self, fields: dict, changed) -> None:
        """Raise ValidationError listing every violated constraint.

        ``fields`` is the complete resulting record; vocabulary membership is
        checked only for ``changed`` fields so existing assets that reference
        retired values stay editable.
        """
        errors = field_errors(fields)

        vocabulary_fields = {name: fields.get(name) for name in changed}
        for field_name, value in self.vocabulary.unknown_values(vocabulary_fields).items():
            if self.strict_vocabulary:
                errors.append(f"{field_name} '{value}' is not in the settings list")
            else:
                logger.warning("Asset %s '%s' is not in the settings list", field_name, value)

        if errors:
            raise ValidationError("; ".join(errors))

        purchase_date = fields.get("purchase_date")
        next_service_date = fields.get("next_service_date")
        if next_service_date and purchase_date and next_service_date < purchase_date:
            logger.warning(
                "Asset '%s': next service date %s is before purchase date %s",
                fields.get("inventory_number"), next_service_date, purchase_date,
            )

    def _asset_to_dto(self, asset: Asset) -> AssetResponseDTO:
        """Convert Asset entity to AssetResponseDTO"""
        return AssetResponseDTO.model_validate(asset)
