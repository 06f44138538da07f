"""Tests for maintenance notifications"""
from datetime import date, timedelta
from decimal import Decimal

import pytest

from conftest import run
from sdh_inventory.application.use_cases.notification_use_cases import (
    NotificationUseCases,
    compute_notifications,
)
from sdh_inventory.domain.entities.asset import Asset
from sdh_inventory.domain.entities.notification import NotificationPolicy, NotificationType

TODAY = date(2024, 10, 1)


def make_asset(asset_id, next_service_date=None, offset=None, is_deleted=False):
    if offset is not None:
        next_service_date = TODAY + timedelta(days=offset)
    return Asset(
        id=asset_id,
        name=f"Asset {asset_id}",
        inventory_number=f"SDH-{asset_id}",
        category="Vozidla",
        location="Zbrojnice - Hlavní hala",
        condition="Dobrý",
        manager="Jan Novák",
        purchase_date=date(2015, 5, 12),
        price=Decimal("1000"),
        next_service_date=next_service_date,
        is_deleted=is_deleted,
    )


@pytest.mark.parametrize("offset, expected_type", [
    (-1, NotificationType.DANGER),
    (0, NotificationType.WARNING),
    (1, NotificationType.WARNING),
    (30, NotificationType.WARNING),
])
def test_classification(offset, expected_type):
    notifications = compute_notifications([make_asset("a", offset=offset)], TODAY)

    assert len(notifications) == 1
    assert notifications[0].type == expected_type
    assert notifications[0].days_remaining == offset


def test_beyond_warning_window_is_excluded():
    assert compute_notifications([make_asset("a", offset=31)], TODAY) == []


def test_overdue_and_upcoming_are_ordered():
    assets = [make_asset("far", offset=40), make_asset("soon", offset=10), make_asset("late", offset=-5)]

    notifications = compute_notifications(assets, TODAY)

    assert [(n.asset_id, n.days_remaining, n.type) for n in notifications] == [
        ("late", -5, NotificationType.DANGER),
        ("soon", 10, NotificationType.WARNING),
    ]


def test_notification_carries_asset_details():
    notification = compute_notifications([make_asset("a", offset=3)], TODAY)[0]

    assert notification.asset_name == "Asset a"
    assert notification.date == TODAY + timedelta(days=3)


def test_ties_keep_asset_order():
    assets = [make_asset(name, offset=7) for name in ("c", "a", "b")]

    assert [n.asset_id for n in compute_notifications(assets, TODAY)] == ["c", "a", "b"]


def test_deleted_assets_are_ignored():
    assets = [make_asset("gone", offset=-100, is_deleted=True), make_asset("gone-too", offset=0, is_deleted=True)]

    assert compute_notifications(assets, TODAY) == []


@pytest.mark.parametrize("value", [None, "", "not-a-date", "2024-13-45", 20241001])
def test_missing_or_malformed_dates_are_ignored(value):
    assert compute_notifications([make_asset("a", next_service_date=value)], TODAY) == []


def test_iso_string_dates_are_understood():
    notifications = compute_notifications([make_asset("a", next_service_date="2024-10-03T08:00:00Z")], TODAY)

    assert notifications[0].days_remaining == 2


def test_custom_warning_window():
    policy = NotificationPolicy(warning_days=7)
    assets = [make_asset("in", offset=7), make_asset("out", offset=8)]

    assert [n.asset_id for n in compute_notifications(assets, TODAY, policy)] == ["in"]


def test_use_cases_recompute_after_soft_delete(asset_repository):
    created = run(asset_repository.create(make_asset("", offset=-2)))
    use_cases = NotificationUseCases(asset_repository)

    first = run(use_cases.get_notifications(today=TODAY))
    run(asset_repository.set_deleted_flag(created.id, True))
    second = run(use_cases.get_notifications(today=TODAY))

    assert [n.asset_id for n in first] == [created.id]
    assert first[0].type == NotificationType.DANGER
    assert second == []


def test_use_cases_default_to_current_date(asset_repository):
    use_cases = NotificationUseCases(asset_repository, timezone="Europe/Prague")
    run(asset_repository.create(make_asset("", next_service_date=use_cases.today())))

    notifications = run(use_cases.get_notifications())

    assert notifications[0].days_remaining == 0
    assert notifications[0].type == NotificationType.WARNING
