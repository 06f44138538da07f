"""User repository implementation with database"""
import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sdh_inventory.domain.entities.user import User, UserRole
from sdh_inventory.domain.errors import DuplicateRecordError
from sdh_inventory.domain.repositories.user_repository import UserRepository
from sdh_inventory.infrastructure.database.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositoryDB(UserRepository):
    """User repository implementation with SQL database"""

    def __init__(self, db: Session):
        self.db = db

    def _model_to_entity(self, model: UserModel) -> User:
        """Convert UserModel to User entity"""
        return User(
            id=str(model.id),
            username=model.username,
            role=UserRole(model.role.value) if hasattr(model.role, "value") else UserRole(model.role),
            blocked=model.blocked,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def create(self, user: User, password_hash: str) -> User:
        """Create a new user"""
        existing = await self.get_by_username(user.username)
        if existing:
            raise DuplicateRecordError(f"User with username '{user.username}' already exists")

        user_model = UserModel(
            id=user.id if user.id else None,
            username=user.username,
            password_hash=password_hash,
            role=user.role,
            blocked=user.blocked,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        self.db.add(user_model)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateRecordError(f"User with username '{user.username}' already exists") from e
        self.db.refresh(user_model)

        return self._model_to_entity(user_model)

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        user_model = self.db.query(UserModel).filter(UserModel.id == user_id).first()
        if not user_model:
            return None
        return self._model_to_entity(user_model)

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        user_model = self.db.query(UserModel).filter(UserModel.username == username).first()
        if not user_model:
            return None
        return self._model_to_entity(user_model)

    async def get_password_hash(self, username: str) -> Optional[str]:
        """Get stored password hash"""
        user_model = self.db.query(UserModel).filter(UserModel.username == username).first()
        return user_model.password_hash if user_model else None

    async def get_all(self) -> List[User]:
        """Get all users"""
        user_models = self.db.query(UserModel).order_by(UserModel.username.asc()).all()
        return [self._model_to_entity(model) for model in user_models]

    async def delete(self, user_id: str) -> bool:
        """Delete user"""
        user_model = self.db.query(UserModel).filter(UserModel.id == user_id).first()
        if not user_model:
            return False

        username = user_model.username
        self.db.delete(user_model)
        self.db.commit()
        logger.info("User %s (%s) deleted", user_id, username)
        return True
