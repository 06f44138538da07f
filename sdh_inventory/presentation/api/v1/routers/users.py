"""Users API router"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from sdh_inventory.application.dto.user_dto import UserCreateDTO, UserResponseDTO
from sdh_inventory.application.use_cases.user_use_cases import UserUseCases
from sdh_inventory.domain.errors import InventoryError
from sdh_inventory.presentation.api.v1.dependencies import (
    get_user_use_cases,
    get_admin_user,
    http_error,
)

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


@router.post("/", response_model=UserResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreateDTO,
    use_cases: UserUseCases = Depends(get_user_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Add a new user (Admin only)"""
    try:
        return await use_cases.create_user(user_data)
    except InventoryError as e:
        raise http_error(e)


@router.get("/", response_model=List[UserResponseDTO])
async def get_all_users(
    use_cases: UserUseCases = Depends(get_user_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Get all users (Admin only)"""
    return await use_cases.get_all_users()


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    use_cases: UserUseCases = Depends(get_user_use_cases),
    current_user: dict = Depends(get_admin_user),
):
    """Delete user (Admin only)"""
    if user_id == current_user.get("id"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot delete your own account",
        )

    if not await use_cases.delete_user(user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with ID '{user_id}' not found",
        )
