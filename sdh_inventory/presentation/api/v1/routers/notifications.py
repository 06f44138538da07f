"""Maintenance notifications API router"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends
from sdh_inventory.application.dto.notification_dto import NotificationResponseDTO
from sdh_inventory.application.use_cases.notification_use_cases import NotificationUseCases
from sdh_inventory.presentation.api.v1.dependencies import (
    get_notification_use_cases,
    get_current_user,
)

router = APIRouter(prefix="/notifications", tags=["notifications"], redirect_slashes=False)


@router.get("/", response_model=List[NotificationResponseDTO])
async def get_notifications(
    today: Optional[date] = None,
    use_cases: NotificationUseCases = Depends(get_notification_use_cases),
    current_user: dict = Depends(get_current_user),
):
    """Upcoming and overdue maintenance, most urgent first.

    ``today`` overrides the reference date (defaults to the current date).
    """
    return await use_cases.get_notifications(today=today)
