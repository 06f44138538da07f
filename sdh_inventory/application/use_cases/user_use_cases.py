"""User use cases"""
import logging
from typing import List, Optional
from sdh_inventory.domain.entities.user import User
from sdh_inventory.domain.errors import ValidationError
from sdh_inventory.domain.repositories.user_repository import UserRepository
from sdh_inventory.application.dto.user_dto import UserCreateDTO, UserResponseDTO
from sdh_inventory.infrastructure.security.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class UserUseCases:
    """Use cases for user operations"""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def authenticate_user(self, username: str, password: str) -> Optional[UserResponseDTO]:
        """Return the user when the password matches, otherwise None"""
        password_hash = await self.user_repository.get_password_hash(username)
        if not password_hash or not verify_password(password, password_hash):
            logger.warning("Authentication failed for username '%s'", username)
            return None
        user = await self.user_repository.get_by_username(username)
        return self._user_to_dto(user) if user else None

    async def create_user(self, user_data: UserCreateDTO) -> UserResponseDTO:
        """Create a user with a bcrypt password hash"""
        username = user_data.username.strip()
        if not username:
            raise ValidationError("Username is required")
        if len(user_data.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

        user = User(id="", username=username, role=user_data.role)
        created = await self.user_repository.create(user, hash_password(user_data.password))
        logger.info("User '%s' created with role %s", created.username, created.role.value)
        return self._user_to_dto(created)

    async def get_user(self, user_id: str) -> Optional[UserResponseDTO]:
        """Get user by ID"""
        user = await self.user_repository.get_by_id(user_id)
        return self._user_to_dto(user) if user else None

    async def get_all_users(self) -> List[UserResponseDTO]:
        """Get all users"""
        users = await self.user_repository.get_all()
        return [self._user_to_dto(user) for user in users]

    async def delete_user(self, user_id: str) -> bool:
        """Delete user"""
        return await self.user_repository.delete(user_id)

    def _user_to_dto(self, user: User) -> UserResponseDTO:
        """Convert User entity to UserResponseDTO"""
        return UserResponseDTO.model_validate(user)
