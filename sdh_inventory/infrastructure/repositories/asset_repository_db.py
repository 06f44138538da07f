"""SQL implementation of AssetRepository"""
import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sdh_inventory.domain.entities.asset import Asset, EDITABLE_FIELDS
from sdh_inventory.domain.errors import DuplicateRecordError, NotFoundError, PersistenceError
from sdh_inventory.domain.repositories.asset_repository import AssetRepository
from sdh_inventory.infrastructure.database.models import AssetModel

logger = logging.getLogger(__name__)


class AssetRepositoryDB(AssetRepository):
    """SQL implementation of AssetRepository"""

    def __init__(self, db: Session):
        self.db = db

    def _asset_model_to_entity(self, model: AssetModel) -> Asset:
        """Convert AssetModel to Asset entity"""
        return Asset(
            id=str(model.id),
            name=model.name,
            inventory_number=model.inventory_number,
            category=model.category,
            location=model.location,
            condition=model.condition,
            manager=model.manager,
            purchase_date=model.purchase_date,
            price=model.price,
            description=model.description,
            maintenance_notes=model.maintenance_notes,
            image_url=model.image_url,
            next_service_date=model.next_service_date,
            is_deleted=bool(model.is_deleted),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _apply_entity(self, model: AssetModel, asset: Asset) -> None:
        for field_name in EDITABLE_FIELDS:
            setattr(model, field_name, getattr(asset, field_name))
        model.is_deleted = asset.is_deleted

    def _commit(self, action: str) -> None:
        """Commit the session, translating store failures into domain errors"""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error("Asset store rejected %s: %s", action, e.orig)
            raise DuplicateRecordError(
                f"Failed to {action}: an asset with the same inventory number already exists"
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Asset store failed to %s: %s", action, e)
            raise PersistenceError(f"Failed to {action}: {e}") from e

    def _get_model(self, asset_id: str) -> Optional[AssetModel]:
        try:
            return self.db.query(AssetModel).filter(AssetModel.id == asset_id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to load asset '{asset_id}': {e}") from e

    async def create(self, asset: Asset) -> Asset:
        """Create a new asset"""
        asset_model = AssetModel(
            id=asset.id if asset.id else None,
            created_at=asset.created_at,
            updated_at=asset.updated_at,
        )
        self._apply_entity(asset_model, asset)

        self.db.add(asset_model)
        self._commit("create asset")
        self.db.refresh(asset_model)

        return self._asset_model_to_entity(asset_model)

    async def get_by_id(self, asset_id: str) -> Optional[Asset]:
        """Get asset by ID"""
        asset_model = self._get_model(asset_id)
        if not asset_model:
            return None
        return self._asset_model_to_entity(asset_model)

    async def get_all(self) -> List[Asset]:
        """Get all assets, newest first"""
        try:
            asset_models = self.db.query(AssetModel).order_by(AssetModel.created_at.desc()).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to load assets: {e}") from e
        return [self._asset_model_to_entity(model) for model in asset_models]

    async def update(self, asset_id: str, fields: dict) -> Asset:
        """Overwrite the given fields of an asset"""
        asset_model = self._get_model(asset_id)
        if not asset_model:
            raise NotFoundError(f"Asset with ID '{asset_id}' not found")

        for field_name, value in fields.items():
            if field_name not in EDITABLE_FIELDS:
                continue
            setattr(asset_model, field_name, value)
        asset_model.updated_at = datetime.utcnow()

        self._commit("update asset")
        self.db.refresh(asset_model)

        return self._asset_model_to_entity(asset_model)

    async def set_deleted_flag(self, asset_id: str, is_deleted: bool) -> None:
        """Set the soft-delete flag"""
        asset_model = self._get_model(asset_id)
        if not asset_model:
            raise NotFoundError(f"Asset with ID '{asset_id}' not found")

        asset_model.is_deleted = is_deleted
        asset_model.updated_at = datetime.utcnow()
        self._commit("change asset deleted flag")

    async def delete(self, asset_id: str) -> bool:
        """Permanently remove an asset"""
        asset_model = self._get_model(asset_id)
        if not asset_model:
            return False

        self.db.delete(asset_model)
        self._commit("delete asset")
        return True

    async def upsert_many(self, assets: List[Asset]) -> int:
        """Stage inserts or overwrites by id; ``commit`` ends the transaction"""
        for asset in assets:
            asset_model = self.db.get(AssetModel, asset.id)
            if asset_model is None:
                asset_model = AssetModel(
                    id=asset.id,
                    created_at=asset.created_at,
                    updated_at=asset.updated_at,
                )
                self.db.add(asset_model)
            else:
                asset_model.updated_at = datetime.utcnow()
            self._apply_entity(asset_model, asset)
            # Flush per row so a clash is reported against the row that caused it
            try:
                self.db.flush()
            except IntegrityError as e:
                self.db.rollback()
                raise DuplicateRecordError(
                    f"Failed to restore asset '{asset.inventory_number}': duplicate inventory number"
                ) from e
            except SQLAlchemyError as e:
                self.db.rollback()
                raise PersistenceError(f"Failed to restore assets: {e}") from e
        return len(assets)

    async def commit(self) -> None:
        """Commit the session"""
        self._commit("save assets")

    async def rollback(self) -> None:
        """Roll the session back"""
        self.db.rollback()
