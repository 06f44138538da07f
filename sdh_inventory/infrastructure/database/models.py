"""SQLAlchemy database models"""
from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
import uuid
from datetime import datetime
from sdh_inventory.infrastructure.database.base import Base
from sdh_inventory.infrastructure.config.settings import settings
from sdh_inventory.domain.entities.user import UserRole
from sdh_inventory.domain.entities.settings_list import SettingsListType


def get_id_column():
    """Get ID column based on database type"""
    if settings.DATABASE_TYPE == "postgresql":
        return Column(PG_UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid.uuid4()))
    else:
        return Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))


class UserModel(Base):
    """Application user"""
    __tablename__ = "app_users"

    id = get_id_column()
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(SQLEnum(UserRole, native_enum=False), nullable=False, default=UserRole.READER)
    blocked = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class AssetModel(Base):
    """Inventory asset"""
    __tablename__ = "assets"

    id = get_id_column()
    name = Column(String(255), nullable=False)
    inventory_number = Column(String(100), unique=True, nullable=False, index=True)
    category = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    condition = Column(String(100), nullable=False)
    manager = Column(String(255), nullable=False)
    purchase_date = Column(Date, nullable=False)
    price = Column(Numeric(14, 2), nullable=False, default=0)
    description = Column(Text, nullable=True)
    maintenance_notes = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)  # URL, data URI or /uploads/ path
    next_service_date = Column(Date, nullable=True, index=True)
    is_deleted = Column(Boolean, default=False, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class SettingsEntryModel(Base):
    """Value of a runtime-editable settings list"""
    __tablename__ = "settings_lists"
    __table_args__ = (UniqueConstraint("type", "value", name="uq_settings_lists_type_value"),)

    id = get_id_column()
    type = Column(SQLEnum(SettingsListType, native_enum=False), nullable=False, index=True)
    value = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
