"""Assets API router"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from typing import List, Optional
from sdh_inventory.application.dto.asset_dto import (
    AssetCreateDTO,
    AssetUpdateDTO,
    AssetResponseDTO,
    AssetSummaryDTO,
)
from sdh_inventory.application.use_cases.asset_use_cases import AssetUseCases
from sdh_inventory.domain.errors import InventoryError
from sdh_inventory.infrastructure.storage import delete_file, save_uploaded_file
from sdh_inventory.presentation.api.v1.dependencies import (
    get_asset_use_cases,
    get_admin_user,
    get_current_user,
    http_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assets", tags=["assets"], redirect_slashes=False)


@router.get("/", response_model=List[AssetResponseDTO])
async def list_assets(
    search: Optional[str] = None,
    category: Optional[str] = None,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
    current_user: dict = Depends(get_current_user),
):
    """Active assets, optionally filtered by name / inventory number and category"""
    try:
        return await use_cases.search_assets(search=search, category=category)
    except InventoryError as e:
        raise http_error(e)


@router.get("/summary", response_model=AssetSummaryDTO)
async def get_summary(
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
    current_user: dict = Depends(get_current_user),
):
    """Number of active assets and their total value"""
    try:
        return await use_cases.get_summary()
    except InventoryError as e:
        raise http_error(e)


@router.get("/trash", response_model=List[AssetResponseDTO])
async def list_trash(
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Soft-deleted assets (Admin only)"""
    try:
        return await use_cases.list_deleted_assets()
    except InventoryError as e:
        raise http_error(e)


@router.post("/", response_model=AssetResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_asset(
    asset_data: AssetCreateDTO,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Create a new asset (Admin only)"""
    try:
        return await use_cases.create_asset(asset_data)
    except InventoryError as e:
        raise http_error(e)


@router.get("/{asset_id}", response_model=AssetResponseDTO)
async def get_asset(
    asset_id: str,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
    current_user: dict = Depends(get_current_user),
):
    """Get asset by ID"""
    try:
        asset = await use_cases.get_asset(asset_id)
    except InventoryError as e:
        raise http_error(e)
    if not asset:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Asset with ID '{asset_id}' not found",
        )
    return asset


@router.patch("/{asset_id}", response_model=AssetResponseDTO)
async def update_asset(
    asset_id: str,
    asset_data: AssetUpdateDTO,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Partial update; fields left out of the body are kept (Admin only)"""
    try:
        return await use_cases.update_asset(asset_id, asset_data)
    except InventoryError as e:
        raise http_error(e)


@router.post("/{asset_id}/image", response_model=AssetResponseDTO)
async def upload_asset_image(
    asset_id: str,
    image: UploadFile = File(...),
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Upload a photo and make it the asset image (Admin only)"""
    try:
        existing = await use_cases.get_asset(asset_id)
    except InventoryError as e:
        raise http_error(e)
    if not existing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Asset with ID '{asset_id}' not found",
        )

    try:
        image_url = await save_uploaded_file(image)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    try:
        updated = await use_cases.update_asset(asset_id, AssetUpdateDTO(image_url=image_url))
    except InventoryError as e:
        delete_file(image_url)
        raise http_error(e)

    if existing.image_url != image_url:
        delete_file(existing.image_url)
    return updated


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_asset(
    asset_id: str,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Move an asset to the trash (Admin only)"""
    try:
        await use_cases.soft_delete_asset(asset_id)
    except InventoryError as e:
        raise http_error(e)


@router.post("/{asset_id}/restore", response_model=AssetResponseDTO)
async def restore_asset(
    asset_id: str,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Take an asset out of the trash (Admin only)"""
    try:
        await use_cases.restore_asset(asset_id)
        return await use_cases.get_asset(asset_id)
    except InventoryError as e:
        raise http_error(e)


@router.delete("/{asset_id}/purge", status_code=status.HTTP_204_NO_CONTENT)
async def purge_asset(
    asset_id: str,
    use_cases: AssetUseCases = Depends(get_asset_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Permanently remove an asset from the trash (Admin only)"""
    try:
        purged = await use_cases.purge_asset(asset_id)
    except InventoryError as e:
        raise http_error(e)

    if delete_file(purged.image_url):
        logger.info("Removed image of purged asset %s", asset_id)
