"""Backup snapshot DTOs

Snapshots written by the previous client used camelCase keys; both spellings
are accepted on restore.
"""
import math
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator
from sdh_inventory.application.dto.asset_dto import Money
from sdh_inventory.domain.entities.asset import coerce_date
from sdh_inventory.domain.entities.settings_list import SettingsListType


class BackupAssetDTO(BaseModel):
    """Asset as stored in a snapshot, including id and deleted flag"""
    id: str
    name: str
    inventory_number: str = Field(validation_alias=AliasChoices("inventory_number", "inventoryNumber"))
    category: str
    location: str
    condition: str
    manager: str
    purchase_date: date = Field(validation_alias=AliasChoices("purchase_date", "purchaseDate"))
    price: Money = Decimal("0")
    description: Optional[str] = None
    maintenance_notes: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("maintenance_notes", "maintenanceNotes")
    )
    image_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("image_url", "imageUrl"))
    next_service_date: Optional[date] = Field(
        default=None, validation_alias=AliasChoices("next_service_date", "nextServiceDate")
    )
    is_deleted: bool = Field(default=False, validation_alias=AliasChoices("is_deleted", "isDeleted"))
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True, "str_strip_whitespace": True}

    @field_validator("next_service_date", mode="before")
    @classmethod
    def _lenient_service_date(cls, value):
        # Partially migrated data may carry junk here; treat it as "no date"
        return coerce_date(value)

    @field_validator("is_deleted", mode="before")
    @classmethod
    def _null_is_not_deleted(cls, value):
        return False if value is None else value

    @field_validator("price", mode="before")
    @classmethod
    def _float_price_to_cents(cls, value):
        # JSON numbers are binary floats; snapshots from the browser client
        # may carry artifacts such as 0.30000000000000004
        if isinstance(value, float) and math.isfinite(value):
            return Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return value


class BackupSettingDTO(BaseModel):
    """Settings list entry as stored in a snapshot"""
    type: SettingsListType
    value: str
    is_active: bool = Field(default=True, validation_alias=AliasChoices("is_active", "isActive"))

    model_config = {"from_attributes": True}


class BackupSnapshotDTO(BaseModel):
    """Complete export of assets and settings lists"""
    timestamp: datetime
    assets: List[BackupAssetDTO] = []
    settings: List[BackupSettingDTO] = []


class RestoreResultDTO(BaseModel):
    """Counts of restored records"""
    assets: int
    settings: int
