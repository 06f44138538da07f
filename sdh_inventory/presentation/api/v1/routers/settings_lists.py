"""Settings lists API router"""
from fastapi import APIRouter, Depends, status
from typing import List
from sdh_inventory.application.dto.settings_dto import (
    SettingsEntryDTO,
    SettingsListsResponseDTO,
    SettingsValueDTO,
)
from sdh_inventory.application.use_cases.settings_use_cases import SettingsUseCases
from sdh_inventory.domain.entities.settings_list import SettingsListType
from sdh_inventory.domain.errors import InventoryError
from sdh_inventory.presentation.api.v1.dependencies import (
    get_settings_use_cases,
    get_admin_user,
    get_current_user,
    http_error,
)

router = APIRouter(prefix="/settings-lists", tags=["settings"], redirect_slashes=False)


@router.get("/", response_model=SettingsListsResponseDTO)
async def get_settings_lists(
    use_cases: SettingsUseCases = Depends(get_settings_use_cases),
    current_user: dict = Depends(get_current_user),
):
    """Values offered for every list (built-in defaults for empty lists)"""
    vocabulary = await use_cases.get_vocabulary()
    return SettingsListsResponseDTO(lists=vocabulary.values)


@router.get("/{list_type}", response_model=List[str])
async def get_settings_list(
    list_type: SettingsListType,
    include_inactive: bool = False,
    use_cases: SettingsUseCases = Depends(get_settings_use_cases),
    current_user: dict = Depends(get_current_user),
):
    """Stored values of one list"""
    return await use_cases.list_values(list_type, include_inactive=include_inactive)


@router.post("/{list_type}", response_model=SettingsEntryDTO, status_code=status.HTTP_201_CREATED)
async def add_settings_value(
    list_type: SettingsListType,
    value_data: SettingsValueDTO,
    use_cases: SettingsUseCases = Depends(get_settings_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Add a value or reactivate it (Admin only)"""
    try:
        return await use_cases.add_value(list_type, value_data.value)
    except InventoryError as e:
        raise http_error(e)


@router.delete("/{list_type}/{value}", status_code=status.HTTP_204_NO_CONTENT)
async def deactivate_settings_value(
    list_type: SettingsListType,
    value: str,
    use_cases: SettingsUseCases = Depends(get_settings_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Deactivate a value; assets already using it keep it (Admin only)"""
    try:
        await use_cases.deactivate_value(list_type, value)
    except InventoryError as e:
        raise http_error(e)
