"""API dependencies"""
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from sdh_inventory.domain.entities.notification import NotificationPolicy
from sdh_inventory.domain.errors import DuplicateRecordError, NotFoundError, PersistenceError, ValidationError
from sdh_inventory.infrastructure.config.settings import settings
from sdh_inventory.infrastructure.database.base import get_db
from sdh_inventory.infrastructure.repositories.asset_repository_db import AssetRepositoryDB
from sdh_inventory.infrastructure.repositories.settings_repository_db import SettingsRepositoryDB
from sdh_inventory.infrastructure.repositories.user_repository_db import UserRepositoryDB
from sdh_inventory.application.use_cases.asset_use_cases import AssetUseCases
from sdh_inventory.application.use_cases.backup_use_cases import BackupUseCases
from sdh_inventory.application.use_cases.notification_use_cases import NotificationUseCases
from sdh_inventory.application.use_cases.settings_use_cases import SettingsUseCases
from sdh_inventory.application.use_cases.user_use_cases import UserUseCases
from sdh_inventory.infrastructure.security.jwt import decode_access_token

# HTTP Bearer token scheme (optional for public endpoints)
security = HTTPBearer(auto_error=False)


def http_error(error: Exception) -> HTTPException:
    """Translate a domain error into the matching HTTP error"""
    if isinstance(error, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, DuplicateRecordError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(error, PersistenceError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(error))


def get_user_repository(db: Session = Depends(get_db)) -> UserRepositoryDB:
    """Get user repository instance with database session"""
    return UserRepositoryDB(db)


def get_user_use_cases(db: Session = Depends(get_db)) -> UserUseCases:
    """Get user use cases instance with database session"""
    return UserUseCases(get_user_repository(db))


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    use_cases: UserUseCases = Depends(get_user_use_cases),
) -> dict:
    """
    Get current authenticated user from JWT token

    Raises:
        HTTPException: If token is invalid, user not found or blocked
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials)
    user_id = payload.get("sub") if payload else None
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await use_cases.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if user.blocked:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is blocked",
        )

    return {
        "id": user.id,
        "username": user.username,
        "role": user.role.value,
        "blocked": user.blocked,
    }


def get_admin_user(
    current_user: dict = Depends(get_current_user),
) -> dict:
    """Get current admin user"""
    if current_user.get("role") != "ADMIN":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions",
        )
    return current_user


def get_settings_use_cases(db: Session = Depends(get_db)) -> SettingsUseCases:
    """Get settings list use cases instance with database session"""
    return SettingsUseCases(SettingsRepositoryDB(db))


async def get_asset_use_cases(db: Session = Depends(get_db)) -> AssetUseCases:
    """Get asset use cases bound to the current settings vocabulary"""
    vocabulary = await SettingsUseCases(SettingsRepositoryDB(db)).get_vocabulary()
    return AssetUseCases(
        AssetRepositoryDB(db),
        vocabulary=vocabulary,
        strict_vocabulary=settings.STRICT_VOCABULARY,
    )


def get_notification_use_cases(db: Session = Depends(get_db)) -> NotificationUseCases:
    """Get notification use cases instance with database session"""
    return NotificationUseCases(
        AssetRepositoryDB(db),
        policy=NotificationPolicy(warning_days=settings.MAINTENANCE_WARNING_DAYS),
        timezone=settings.TIMEZONE,
    )


def get_backup_use_cases(db: Session = Depends(get_db)) -> BackupUseCases:
    """Get backup use cases; both repositories share one session so a restore commits once"""
    return BackupUseCases(AssetRepositoryDB(db), SettingsRepositoryDB(db))
