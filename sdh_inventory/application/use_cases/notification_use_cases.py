"""Maintenance notifications"""
import logging
from datetime import date, datetime
from typing import Iterable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from sdh_inventory.domain.entities.asset import Asset, coerce_date
from sdh_inventory.domain.entities.notification import (
    Notification,
    NotificationPolicy,
    NotificationType,
)
from sdh_inventory.domain.repositories.asset_repository import AssetRepository
from sdh_inventory.application.dto.notification_dto import NotificationResponseDTO

logger = logging.getLogger(__name__)


def compute_notifications(
    assets: Iterable[Asset],
    today: date,
    policy: NotificationPolicy = NotificationPolicy(),
) -> List[Notification]:
    """Derive maintenance alerts from ``assets`` as of ``today``.

    Deleted assets and assets without a (parsable) service date are skipped.
    Overdue dates give DANGER, dates up to ``policy.warning_days`` ahead
    (inclusive, today counts as 0) give WARNING, later dates nothing.
    The result is ordered by days remaining; ties keep the input order.
    """
    notifications = []
    for asset in assets:
        if asset.is_deleted:
            continue
        due = coerce_date(asset.next_service_date)
        if due is None:
            continue

        days_remaining = (due - today).days
        if days_remaining > policy.warning_days:
            continue

        notifications.append(Notification(
            asset_id=asset.id,
            asset_name=asset.name,
            date=due,
            type=NotificationType.DANGER if days_remaining < 0 else NotificationType.WARNING,
            days_remaining=days_remaining,
        ))

    notifications.sort(key=lambda notification: notification.days_remaining)
    return notifications


class NotificationUseCases:
    """Use cases for maintenance notifications"""

    def __init__(
        self,
        asset_repository: AssetRepository,
        policy: Optional[NotificationPolicy] = None,
        timezone: Optional[str] = None,
    ):
        self.asset_repository = asset_repository
        self.policy = policy or NotificationPolicy()
        self.timezone = timezone

    def today(self) -> date:
        """Current calendar date in the configured timezone"""
        if self.timezone:
            try:
                return datetime.now(ZoneInfo(self.timezone)).date()
            except ZoneInfoNotFoundError:
                logger.warning("Unknown timezone '%s', using local date", self.timezone)
        return date.today()

    async def get_notifications(self, today: Optional[date] = None) -> List[NotificationResponseDTO]:
        """Recompute alerts from the current asset set"""
        assets = await self.asset_repository.get_all()
        notifications = compute_notifications(assets, today or self.today(), self.policy)
        return [NotificationResponseDTO.model_validate(notification) for notification in notifications]
