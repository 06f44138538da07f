"""Authentication API router"""
from datetime import timedelta
from fastapi import APIRouter, Depends, HTTPException, status
from sdh_inventory.application.dto.auth_dto import LoginDTO, TokenResponseDTO
from sdh_inventory.application.use_cases.user_use_cases import UserUseCases
from sdh_inventory.infrastructure.config.settings import settings
from sdh_inventory.infrastructure.security.jwt import create_access_token
from sdh_inventory.presentation.api.v1.dependencies import (
    get_user_use_cases,
    get_current_user,
)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/login", response_model=TokenResponseDTO)
async def login(
    login_data: LoginDTO,
    use_cases: UserUseCases = Depends(get_user_use_cases),
):
    """
    Authenticate user and return JWT token

    Returns:
        TokenResponseDTO with access token and user data
    """
    user = await use_cases.authenticate_user(login_data.username, login_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if user.blocked:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is blocked",
        )

    access_token = create_access_token(
        data={"sub": user.id, "username": user.username, "role": user.role.value},
        expires_delta=timedelta(hours=settings.JWT_EXPIRE_HOURS),
    )

    return TokenResponseDTO(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.JWT_EXPIRE_HOURS * 3600,
        user={
            "id": user.id,
            "username": user.username,
            "role": user.role.value,
            "blocked": user.blocked,
        },
    )


@router.get("/me", response_model=dict)
async def get_current_user_info(
    current_user: dict = Depends(get_current_user),
):
    """Get current authenticated user information"""
    return current_user
