"""Settings list use cases"""
import logging
from typing import Dict, List
from sdh_inventory.domain.entities.settings_list import InventoryVocabulary, SettingsListType
from sdh_inventory.domain.errors import ValidationError
from sdh_inventory.domain.repositories.settings_repository import SettingsRepository
from sdh_inventory.application.dto.settings_dto import SettingsEntryDTO

logger = logging.getLogger(__name__)

# Built-in vocabularies, used while a list has no active values in the store
DEFAULT_VALUES: Dict[SettingsListType, List[str]] = {
    SettingsListType.CATEGORY: [
        "Vozidla",
        "Ochranné pomůcky",
        "Hadice a armatury",
        "Nářadí",
        "Elektronika",
        "Ostatní",
    ],
    SettingsListType.LOCATION: [
        "Zbrojnice - Hlavní hala",
        "Zbrojnice - Kancelář",
        "Zbrojnice - Šatna",
        "Tatra 815 (CAS 30)",
        "Ford Transit (DA)",
        "Sklad",
    ],
    SettingsListType.CONDITION: [
        "Nové",
        "Dobrý",
        "Opotřebované",
        "Poškozené",
        "K vyřazení",
    ],
    SettingsListType.MANAGER: [
        "Jan Novák",
        "Petr Svoboda",
        "Karel Dvořák",
        "Milan Černý",
        "Lukáš Veselý",
    ],
}


class SettingsUseCases:
    """Use cases for the runtime-editable settings lists"""

    def __init__(self, settings_repository: SettingsRepository):
        self.settings_repository = settings_repository

    async def list_values(self, list_type: SettingsListType, include_inactive: bool = False) -> List[str]:
        """Values of one list"""
        return await self.settings_repository.list_values(list_type, include_inactive=include_inactive)

    async def list_entries(self) -> List[SettingsEntryDTO]:
        """Every entry of every list, active and inactive"""
        entries = await self.settings_repository.list_all()
        return [SettingsEntryDTO.model_validate(entry) for entry in entries]

    async def add_value(self, list_type: SettingsListType, value: str) -> SettingsEntryDTO:
        """Add a value, or reactivate it if it was deactivated"""
        value = (value or "").strip()
        if not value:
            raise ValidationError("Value must not be empty")
        entry = await self.settings_repository.upsert_value(list_type, value)
        logger.info("Settings list %s: '%s' active", list_type.value, value)
        return SettingsEntryDTO.model_validate(entry)

    async def deactivate_value(self, list_type: SettingsListType, value: str) -> None:
        """Hide a value from the list; assets that use it stay valid"""
        await self.settings_repository.deactivate_value(list_type, value)
        logger.info("Settings list %s: '%s' deactivated", list_type.value, value)

    async def get_vocabulary(self) -> InventoryVocabulary:
        """Active values of every list, built-in defaults for empty lists"""
        values = {}
        for list_type in SettingsListType:
            active = await self.settings_repository.list_values(list_type)
            values[list_type] = active or list(DEFAULT_VALUES[list_type])
        return InventoryVocabulary(values=values)

    async def seed_defaults(self) -> int:
        """Store the built-in values for lists that have no entries at all"""
        added = 0
        for list_type, defaults in DEFAULT_VALUES.items():
            if await self.settings_repository.list_values(list_type, include_inactive=True):
                continue
            for value in defaults:
                await self.settings_repository.upsert_value(list_type, value)
                added += 1
        return added
