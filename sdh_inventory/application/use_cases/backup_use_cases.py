"""Backup and restore use cases"""
import logging
from datetime import datetime
from sdh_inventory.domain.entities.asset import Asset, field_errors
from sdh_inventory.domain.entities.settings_list import SettingsEntry
from sdh_inventory.domain.errors import InventoryError, ValidationError
from sdh_inventory.domain.repositories.asset_repository import AssetRepository
from sdh_inventory.domain.repositories.settings_repository import SettingsRepository
from sdh_inventory.application.dto.backup_dto import (
    BackupAssetDTO,
    BackupSettingDTO,
    BackupSnapshotDTO,
    RestoreResultDTO,
)

logger = logging.getLogger(__name__)


class BackupUseCases:
    """Full snapshot export and restore of assets and settings lists"""

    def __init__(self, asset_repository: AssetRepository, settings_repository: SettingsRepository):
        self.asset_repository = asset_repository
        self.settings_repository = settings_repository

    async def export_snapshot(self) -> BackupSnapshotDTO:
        """Every asset (including the trash) and every settings entry"""
        assets = await self.asset_repository.get_all()
        entries = await self.settings_repository.list_all()
        snapshot = BackupSnapshotDTO(
            timestamp=datetime.utcnow(),
            assets=[BackupAssetDTO.model_validate(asset) for asset in assets],
            settings=[BackupSettingDTO.model_validate(entry) for entry in entries],
        )
        logger.info("Backup exported: %d assets, %d settings", len(snapshot.assets), len(snapshot.settings))
        return snapshot

    async def restore_snapshot(self, snapshot: BackupSnapshotDTO) -> RestoreResultDTO:
        """Upsert settings by (type, value) and assets by id, all or nothing"""
        self._check_snapshot(snapshot)

        entries = [
            SettingsEntry(id="", type=setting.type, value=setting.value, is_active=setting.is_active)
            for setting in snapshot.settings
        ]
        assets = [Asset(**asset.model_dump()) for asset in snapshot.assets]

        try:
            settings_count = await self.settings_repository.upsert_many(entries)
            assets_count = await self.asset_repository.upsert_many(assets)
            await self.settings_repository.commit()
            await self.asset_repository.commit()
        except InventoryError:
            await self.settings_repository.rollback()
            await self.asset_repository.rollback()
            logger.error("Backup from %s not restored, nothing was changed", snapshot.timestamp.isoformat())
            raise

        logger.info(
            "Backup from %s restored: %d assets, %d settings",
            snapshot.timestamp.isoformat(), assets_count, settings_count,
        )
        return RestoreResultDTO(assets=assets_count, settings=settings_count)

    def _check_snapshot(self, snapshot: BackupSnapshotDTO) -> None:
        """Reject the whole snapshot before anything is written"""
        ids = [asset.id for asset in snapshot.assets]
        if len(ids) != len(set(ids)):
            raise ValidationError("Backup contains duplicate asset ids")
        if any(not asset_id for asset_id in ids):
            raise ValidationError("Backup contains assets without an id")

        numbers = [asset.inventory_number for asset in snapshot.assets]
        duplicates = sorted({number for number in numbers if numbers.count(number) > 1})
        if duplicates:
            raise ValidationError(f"Backup contains duplicate inventory numbers: {', '.join(duplicates)}")

        errors = []
        for asset in snapshot.assets:
            for message in field_errors(asset.model_dump()):
                errors.append(f"asset '{asset.id}': {message}")
        for setting in snapshot.settings:
            if not setting.value.strip():
                errors.append(f"settings list {setting.type.value}: empty value")
        if errors:
            raise ValidationError("Invalid backup: " + "; ".join(errors))
