"""Tests for settings lists and backup / restore"""
import json
from datetime import date
from decimal import Decimal

import pytest

from conftest import run
from sdh_inventory.application.dto.backup_dto import BackupSnapshotDTO
from sdh_inventory.application.use_cases.backup_use_cases import BackupUseCases
from sdh_inventory.application.use_cases.settings_use_cases import DEFAULT_VALUES, SettingsUseCases
from sdh_inventory.domain.entities.settings_list import SettingsListType
from sdh_inventory.domain.errors import DuplicateRecordError, NotFoundError, ValidationError
from sdh_inventory.infrastructure.repositories.asset_repository_impl import AssetRepositoryImpl
from sdh_inventory.infrastructure.repositories.settings_repository_impl import SettingsRepositoryImpl


@pytest.fixture
def settings_use_cases(settings_repository):
    return SettingsUseCases(settings_repository)


def test_add_value_is_idempotent(settings_use_cases):
    run(settings_use_cases.add_value(SettingsListType.LOCATION, "Garáž"))
    run(settings_use_cases.add_value(SettingsListType.LOCATION, " Garáž "))

    assert run(settings_use_cases.list_values(SettingsListType.LOCATION)) == ["Garáž"]


def test_add_value_reactivates(settings_use_cases):
    run(settings_use_cases.add_value(SettingsListType.MANAGER, "Petr Svoboda"))
    run(settings_use_cases.deactivate_value(SettingsListType.MANAGER, "Petr Svoboda"))
    assert run(settings_use_cases.list_values(SettingsListType.MANAGER)) == []

    entry = run(settings_use_cases.add_value(SettingsListType.MANAGER, "Petr Svoboda"))

    assert entry.is_active is True
    assert run(settings_use_cases.list_values(SettingsListType.MANAGER)) == ["Petr Svoboda"]


def test_deactivated_value_is_kept_as_inactive(settings_use_cases):
    run(settings_use_cases.add_value(SettingsListType.CONDITION, "Poškozené"))
    run(settings_use_cases.deactivate_value(SettingsListType.CONDITION, "Poškozené"))

    assert run(settings_use_cases.list_values(SettingsListType.CONDITION, include_inactive=True)) == ["Poškozené"]


def test_empty_value_is_rejected(settings_use_cases):
    with pytest.raises(ValidationError):
        run(settings_use_cases.add_value(SettingsListType.CATEGORY, "   "))


def test_deactivate_unknown_value(settings_use_cases):
    with pytest.raises(NotFoundError):
        run(settings_use_cases.deactivate_value(SettingsListType.CATEGORY, "Letadla"))


def test_vocabulary_falls_back_to_defaults(settings_use_cases):
    run(settings_use_cases.add_value(SettingsListType.CATEGORY, "Vozidla"))

    vocabulary = run(settings_use_cases.get_vocabulary())

    assert vocabulary.allowed(SettingsListType.CATEGORY) == ["Vozidla"]
    assert vocabulary.allowed(SettingsListType.LOCATION) == DEFAULT_VALUES[SettingsListType.LOCATION]


def test_seed_defaults_fills_only_empty_lists(settings_use_cases):
    run(settings_use_cases.add_value(SettingsListType.MANAGER, "Jiří Malý"))
    run(settings_use_cases.deactivate_value(SettingsListType.MANAGER, "Jiří Malý"))

    added = run(settings_use_cases.seed_defaults())

    expected = sum(len(values) for list_type, values in DEFAULT_VALUES.items() if list_type != SettingsListType.MANAGER)
    assert added == expected
    assert run(settings_use_cases.list_values(SettingsListType.MANAGER)) == []
    assert run(settings_use_cases.seed_defaults()) == 0


def _populate(asset_use_cases, settings_use_cases, make_asset_data):
    kept = run(asset_use_cases.create_asset(make_asset_data(
        name="Tatra 815 CAS 30",
        category="Vozidla",
        price=Decimal("4500000"),
        next_service_date=date(2024, 11, 15),
    )))
    trashed = run(asset_use_cases.create_asset(make_asset_data(name="Stará proudnice")))
    run(asset_use_cases.soft_delete_asset(trashed.id))
    run(settings_use_cases.add_value(SettingsListType.CATEGORY, "Vozidla"))
    run(settings_use_cases.add_value(SettingsListType.LOCATION, "Stará zbrojnice"))
    run(settings_use_cases.deactivate_value(SettingsListType.LOCATION, "Stará zbrojnice"))
    return kept, trashed


def test_export_then_restore_reproduces_state(
    asset_use_cases, asset_repository, settings_use_cases, settings_repository, make_asset_data,
):
    kept, trashed = _populate(asset_use_cases, settings_use_cases, make_asset_data)
    snapshot = run(BackupUseCases(asset_repository, settings_repository).export_snapshot())

    target_assets = AssetRepositoryImpl()
    target_settings = SettingsRepositoryImpl()
    restored_snapshot = BackupSnapshotDTO.model_validate_json(snapshot.model_dump_json())
    result = run(BackupUseCases(target_assets, target_settings).restore_snapshot(restored_snapshot))

    assert (result.assets, result.settings) == (2, 2)
    restored = {asset.id: asset for asset in run(target_assets.get_all())}
    assert set(restored) == {kept.id, trashed.id}
    assert restored[trashed.id].is_deleted is True
    assert restored[kept.id].price == Decimal("4500000")
    assert restored[kept.id].next_service_date == date(2024, 11, 15)
    assert run(target_settings.list_values(SettingsListType.LOCATION)) == []
    assert run(target_settings.list_values(SettingsListType.LOCATION, include_inactive=True)) == ["Stará zbrojnice"]
    assert run(target_settings.list_values(SettingsListType.CATEGORY)) == ["Vozidla"]


def test_restore_overwrites_existing_records(asset_use_cases, asset_repository, settings_repository, make_asset_data):
    created = run(asset_use_cases.create_asset(make_asset_data(location="Sklad")))
    backup = BackupUseCases(asset_repository, settings_repository)
    snapshot = run(backup.export_snapshot())
    run(asset_use_cases.soft_delete_asset(created.id))

    run(backup.restore_snapshot(snapshot))

    assert run(asset_use_cases.get_asset(created.id)).is_deleted is False
    assert len(run(asset_repository.get_all())) == 1


LEGACY_SNAPSHOT = {
    "timestamp": "2024-09-30T18:12:44.120Z",
    "assets": [
        {
            "id": "a1",
            "name": "Dýchací přístroj Dräger PSS 3000",
            "inventoryNumber": "SDH-D-001",
            "category": "Ochranné pomůcky",
            "location": "Tatra 815 (CAS 30)",
            "condition": "Dobrý",
            "manager": "Petr Svoboda",
            "purchaseDate": "2019-04-02",
            "price": 28000,
            "nextServiceDate": "2024-10-20",
            "isDeleted": None,
        },
        {
            "id": "a2",
            "name": "Motorová pila Stihl MS 462",
            "inventoryNumber": "SDH-T-015",
            "category": "Nářadí",
            "location": "Sklad",
            "condition": "Opotřebované",
            "manager": "Karel Dvořák",
            "purchaseDate": "2020-06-18",
            "price": 9500.5,
            "nextServiceDate": "brzy",
            "maintenanceNotes": "Výměna řetězu",
            "isDeleted": True,
        },
    ],
    "settings": [
        {"type": "MANAGER", "value": "Petr Svoboda", "isActive": True},
        {"type": "LOCATION", "value": "Garáž", "isActive": False},
    ],
}


def test_restore_accepts_legacy_snapshot(asset_repository, settings_repository):
    snapshot = BackupSnapshotDTO.model_validate_json(json.dumps(LEGACY_SNAPSHOT))

    result = run(BackupUseCases(asset_repository, settings_repository).restore_snapshot(snapshot))

    assert (result.assets, result.settings) == (2, 2)
    breathing = run(asset_repository.get_by_id("a1"))
    saw = run(asset_repository.get_by_id("a2"))
    assert breathing.is_deleted is False
    assert breathing.inventory_number == "SDH-D-001"
    assert breathing.next_service_date == date(2024, 10, 20)
    assert saw.next_service_date is None
    assert saw.is_deleted is True
    assert saw.price == Decimal("9500.5")
    assert saw.maintenance_notes == "Výměna řetězu"
    assert run(settings_repository.list_values(SettingsListType.LOCATION, include_inactive=True)) == ["Garáž"]


def test_restore_rejects_duplicate_ids(asset_repository, settings_repository):
    data = dict(LEGACY_SNAPSHOT)
    data["assets"] = [LEGACY_SNAPSHOT["assets"][0], LEGACY_SNAPSHOT["assets"][0]]
    snapshot = BackupSnapshotDTO.model_validate(data)

    with pytest.raises(ValidationError, match="duplicate"):
        run(BackupUseCases(asset_repository, settings_repository).restore_snapshot(snapshot))

    assert run(asset_repository.get_all()) == []
    assert run(settings_repository.list_all()) == []


def _snapshot(assets=(), settings=()):
    return BackupSnapshotDTO.model_validate({
        "timestamp": "2024-10-01T12:00:00",
        "assets": list(assets),
        "settings": list(settings),
    })


def _legacy_asset(asset_id, **overrides):
    data = dict(LEGACY_SNAPSHOT["assets"][0], id=asset_id)
    data.update(overrides)
    return data


@pytest.mark.parametrize("overrides, message", [
    ({"name": ""}, "name is required"),
    ({"name": "   "}, "name is required"),
    ({"price": -500}, "price must be a non-negative amount"),
    ({"price": "10.005"}, "decimal places"),
    ({"manager": "x" * 256}, "manager must be at most 255 characters"),
])
def test_restore_rejects_invalid_asset(asset_repository, settings_repository, overrides, message):
    snapshot = _snapshot(
        assets=[_legacy_asset("ok"), _legacy_asset("bad", inventoryNumber="SDH-X-001", **overrides)],
        settings=[{"type": "MANAGER", "value": "Petr Svoboda"}],
    )

    with pytest.raises(ValidationError, match=message):
        run(BackupUseCases(asset_repository, settings_repository).restore_snapshot(snapshot))

    assert run(asset_repository.get_all()) == []
    assert run(settings_repository.list_all()) == []


def test_restore_rejects_duplicate_inventory_numbers(asset_repository, settings_repository):
    snapshot = _snapshot(assets=[_legacy_asset("a1"), _legacy_asset("a2")])

    with pytest.raises(ValidationError, match="SDH-D-001"):
        run(BackupUseCases(asset_repository, settings_repository).restore_snapshot(snapshot))


def test_restore_rejects_empty_settings_value(asset_repository, settings_repository):
    snapshot = _snapshot(settings=[{"type": "LOCATION", "value": "  "}])

    with pytest.raises(ValidationError, match="LOCATION"):
        run(BackupUseCases(asset_repository, settings_repository).restore_snapshot(snapshot))


def test_restore_clash_with_stored_asset_changes_nothing(
    asset_use_cases, asset_repository, settings_repository, make_asset_data,
):
    existing = run(asset_use_cases.create_asset(make_asset_data(inventory_number="SDH-D-001")))
    snapshot = _snapshot(
        assets=[_legacy_asset("new", inventoryNumber="SDH-N-001"), _legacy_asset("other")],
        settings=[{"type": "LOCATION", "value": "Nová zbrojnice"}],
    )

    with pytest.raises(DuplicateRecordError):
        run(BackupUseCases(asset_repository, settings_repository).restore_snapshot(snapshot))

    assert [asset.id for asset in run(asset_repository.get_all())] == [existing.id]
    assert run(settings_repository.list_all()) == []


def test_restore_rounds_float_prices_to_cents(asset_repository, settings_repository):
    snapshot = BackupSnapshotDTO.model_validate_json(json.dumps({
        "timestamp": "2024-10-01T12:00:00",
        "assets": [_legacy_asset("a1", price=0.1 + 0.2)],
    }))

    run(BackupUseCases(asset_repository, settings_repository).restore_snapshot(snapshot))

    assert run(asset_repository.get_by_id("a1")).price == Decimal("0.30")
