# Database
from sdh_inventory.infrastructure.database.base import Base, get_db, init_db
from sdh_inventory.infrastructure.database.models import UserModel, AssetModel, SettingsEntryModel

__all__ = ["Base", "get_db", "init_db", "UserModel", "AssetModel", "SettingsEntryModel"]
