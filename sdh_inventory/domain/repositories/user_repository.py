"""User repository interface"""
from abc import ABC, abstractmethod
from typing import List, Optional
from sdh_inventory.domain.entities.user import User


class UserRepository(ABC):
    """Interface for user repository"""

    @abstractmethod
    async def create(self, user: User, password_hash: str) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def get_password_hash(self, username: str) -> Optional[str]:
        """Get stored password hash for a username"""
        pass

    @abstractmethod
    async def get_all(self) -> List[User]:
        """Get all users"""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete user"""
        pass
