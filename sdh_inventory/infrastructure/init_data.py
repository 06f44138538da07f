"""Initialize default data"""
import logging
from sdh_inventory.application.dto.user_dto import UserCreateDTO
from sdh_inventory.application.use_cases.settings_use_cases import SettingsUseCases
from sdh_inventory.application.use_cases.user_use_cases import UserUseCases
from sdh_inventory.domain.entities.user import UserRole
from sdh_inventory.infrastructure.config.settings import settings
from sdh_inventory.infrastructure.database.base import SessionLocal
from sdh_inventory.infrastructure.repositories.settings_repository_db import SettingsRepositoryDB
from sdh_inventory.infrastructure.repositories.user_repository_db import UserRepositoryDB

logger = logging.getLogger(__name__)


async def init_default_admin():
    """Create the default admin user if missing"""
    db = SessionLocal()
    try:
        repository = UserRepositoryDB(db)
        if await repository.get_by_username(settings.DEFAULT_ADMIN_USERNAME):
            logger.info("Default admin '%s' already exists", settings.DEFAULT_ADMIN_USERNAME)
            return

        await UserUseCases(repository).create_user(UserCreateDTO(
            username=settings.DEFAULT_ADMIN_USERNAME,
            password=settings.DEFAULT_ADMIN_PASSWORD,
            role=UserRole.ADMIN,
        ))
        logger.info("Default admin created: %s", settings.DEFAULT_ADMIN_USERNAME)
    except Exception:
        logger.exception("Failed to create default admin")
        db.rollback()
    finally:
        db.close()


async def init_default_settings():
    """Seed empty settings lists with the built-in values"""
    if not settings.SEED_DEFAULT_SETTINGS:
        return

    db = SessionLocal()
    try:
        added = await SettingsUseCases(SettingsRepositoryDB(db)).seed_defaults()
        if added:
            logger.info("Seeded %d default settings values", added)
    except Exception:
        logger.exception("Failed to seed default settings")
        db.rollback()
    finally:
        db.close()
