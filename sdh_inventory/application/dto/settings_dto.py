"""Settings list DTOs"""
from typing import Dict, List
from pydantic import BaseModel
from sdh_inventory.domain.entities.settings_list import SettingsListType


class SettingsValueDTO(BaseModel):
    """DTO for adding a value to a list"""
    value: str


class SettingsEntryDTO(BaseModel):
    """One list value with its activation state"""
    type: SettingsListType
    value: str
    is_active: bool = True

    model_config = {"from_attributes": True}


class SettingsListsResponseDTO(BaseModel):
    """Active values of every list"""
    lists: Dict[SettingsListType, List[str]]
