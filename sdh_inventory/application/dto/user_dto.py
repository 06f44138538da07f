"""User DTOs"""
from datetime import datetime
from pydantic import BaseModel
from sdh_inventory.domain.entities.user import UserRole


class UserCreateDTO(BaseModel):
    """DTO for creating a user"""
    username: str
    password: str
    role: UserRole = UserRole.READER


class UserResponseDTO(BaseModel):
    """DTO for user response"""
    id: str
    username: str
    role: UserRole
    blocked: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
