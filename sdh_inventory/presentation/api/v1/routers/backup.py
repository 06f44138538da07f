"""Backup API router"""
from datetime import date
from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status
from pydantic import ValidationError as SchemaError
from sdh_inventory.application.dto.backup_dto import BackupSnapshotDTO, RestoreResultDTO
from sdh_inventory.application.use_cases.backup_use_cases import BackupUseCases
from sdh_inventory.domain.errors import InventoryError
from sdh_inventory.presentation.api.v1.dependencies import (
    get_backup_use_cases,
    get_admin_user,
    http_error,
)

router = APIRouter(prefix="/backup", tags=["backup"], redirect_slashes=False)


@router.get("/")
async def download_backup(
    use_cases: BackupUseCases = Depends(get_backup_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Download a JSON snapshot of all assets and settings lists (Admin only)"""
    try:
        snapshot = await use_cases.export_snapshot()
    except InventoryError as e:
        raise http_error(e)

    filename = f"SDH_Backup_{date.today().isoformat()}.json"
    return Response(
        content=snapshot.model_dump_json(indent=2),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/restore", response_model=RestoreResultDTO)
async def restore_backup(
    file: UploadFile = File(...),
    use_cases: BackupUseCases = Depends(get_backup_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Restore a snapshot; existing records with the same id are overwritten (Admin only)"""
    contents = await file.read()
    try:
        snapshot = BackupSnapshotDTO.model_validate_json(contents)
    except SchemaError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid backup file: {e.error_count()} error(s), first: {e.errors()[0]['msg']}",
        )

    try:
        return await use_cases.restore_snapshot(snapshot)
    except InventoryError as e:
        raise http_error(e)
