"""Maintenance notification entity (derived, never stored)"""
from dataclasses import dataclass
from datetime import date
from enum import Enum


class NotificationType(str, Enum):
    """Notification severity"""
    WARNING = "WARNING"  # service due soon
    DANGER = "DANGER"  # service overdue


@dataclass(frozen=True)
class Notification:
    """Upcoming or overdue maintenance of one asset"""
    asset_id: str
    asset_name: str
    date: date
    type: NotificationType
    days_remaining: int


@dataclass(frozen=True)
class NotificationPolicy:
    """How far ahead upcoming maintenance is reported"""
    warning_days: int = 30
