"""Asset DTOs"""
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Optional
from pydantic import BaseModel, PlainSerializer

# Exact in Python, a plain number in JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class AssetCreateDTO(BaseModel):
    """DTO for creating an asset"""
    name: str
    inventory_number: str
    category: str
    location: str
    condition: str
    manager: str
    purchase_date: date
    price: Decimal
    description: Optional[str] = None
    maintenance_notes: Optional[str] = None
    image_url: Optional[str] = None
    next_service_date: Optional[date] = None


class AssetUpdateDTO(BaseModel):
    """DTO for a partial asset update; only explicitly sent fields are applied"""
    name: Optional[str] = None
    inventory_number: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    condition: Optional[str] = None
    manager: Optional[str] = None
    purchase_date: Optional[date] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None
    maintenance_notes: Optional[str] = None
    image_url: Optional[str] = None
    next_service_date: Optional[date] = None


class AssetResponseDTO(BaseModel):
    """DTO for asset response"""
    id: str
    name: str
    inventory_number: str
    category: str
    location: str
    condition: str
    manager: str
    purchase_date: date
    price: Money
    description: Optional[str] = None
    maintenance_notes: Optional[str] = None
    image_url: Optional[str] = None
    next_service_date: Optional[date] = None
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AssetSummaryDTO(BaseModel):
    """Count and total value of active assets"""
    count: int
    total_value: Money
