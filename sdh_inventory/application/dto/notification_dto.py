"""Notification DTOs"""
from datetime import date
from pydantic import BaseModel
from sdh_inventory.domain.entities.notification import NotificationType


class NotificationResponseDTO(BaseModel):
    """Maintenance alert for one asset"""
    asset_id: str
    asset_name: str
    date: date
    type: NotificationType
    days_remaining: int

    model_config = {"from_attributes": True}
