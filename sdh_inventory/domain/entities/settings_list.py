"""Settings list (vocabulary) domain entities"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


class SettingsListType(str, Enum):
    """Runtime-editable vocabularies assets may reference"""
    MANAGER = "MANAGER"
    LOCATION = "LOCATION"
    CATEGORY = "CATEGORY"
    CONDITION = "CONDITION"


@dataclass
class SettingsEntry:
    """One value of a settings list"""
    id: str
    type: SettingsListType
    value: str
    is_active: bool = True
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = datetime.utcnow()


# Asset field each settings list constrains
ASSET_FIELD_BY_LIST = {
    SettingsListType.MANAGER: "manager",
    SettingsListType.LOCATION: "location",
    SettingsListType.CATEGORY: "category",
    SettingsListType.CONDITION: "condition",
}


@dataclass
class InventoryVocabulary:
    """Snapshot of the active settings lists.

    Passed explicitly into the asset use cases so validation never depends on
    ambient application state. A list with no values accepts anything.
    """
    values: Dict[SettingsListType, List[str]] = field(default_factory=dict)

    def allowed(self, list_type: SettingsListType) -> List[str]:
        return list(self.values.get(list_type, []))

    def accepts(self, list_type: SettingsListType, value: str) -> bool:
        allowed = self.values.get(list_type)
        if not allowed:
            return True
        return value in allowed

    def unknown_values(self, fields: dict) -> Dict[str, str]:
        """Return ``{asset_field: value}`` for values outside the vocabulary"""
        unknown = {}
        for list_type, field_name in ASSET_FIELD_BY_LIST.items():
            value = fields.get(field_name)
            if value is None:
                continue
            if not self.accepts(list_type, value):
                unknown[field_name] = value
        return unknown
