"""Asset domain entity"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional


@dataclass
class Asset:
    """Physical inventory item (vehicle, gear, tool)"""
    id: str
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
    is_deleted: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = datetime.utcnow()
        if self.updated_at is None:
            self.updated_at = datetime.utcnow()

    @property
    def is_active(self) -> bool:
        return not self.is_deleted


# Fields a user edit may write. ``id`` and ``is_deleted`` are owned by the
# lifecycle manager.
EDITABLE_FIELDS = (
    "name",
    "inventory_number",
    "category",
    "location",
    "condition",
    "manager",
    "purchase_date",
    "price",
    "description",
    "maintenance_notes",
    "image_url",
    "next_service_date",
)

REQUIRED_TEXT_FIELDS = (
    "name",
    "inventory_number",
    "category",
    "location",
    "condition",
    "manager",
)

# Column sizes of the asset table
TEXT_FIELD_MAX_LENGTHS = {
    "name": 255,
    "inventory_number": 100,
    "category": 255,
    "location": 255,
    "condition": 100,
    "manager": 255,
}

PRICE_DECIMAL_PLACES = 2
PRICE_LIMIT = Decimal("1000000000000")  # Numeric(14, 2)


def field_errors(fields: dict) -> List[str]:
    """Check a complete asset record, returning one message per violation"""
    errors = []
    for name in REQUIRED_TEXT_FIELDS:
        value = fields.get(name)
        if not value:
            errors.append(f"{name} is required")
        elif len(value) > TEXT_FIELD_MAX_LENGTHS[name]:
            errors.append(f"{name} must be at most {TEXT_FIELD_MAX_LENGTHS[name]} characters")

    if fields.get("purchase_date") is None:
        errors.append("purchase_date is required")

    price = fields.get("price")
    if price is None:
        errors.append("price is required")
        return errors
    try:
        price = Decimal(price)
    except (InvalidOperation, TypeError, ValueError):
        errors.append("price must be a number")
        return errors

    if not price.is_finite() or price < 0:
        errors.append("price must be a non-negative amount")
    elif price >= PRICE_LIMIT:
        errors.append(f"price must be less than {PRICE_LIMIT}")
    elif price.as_tuple().exponent < -PRICE_DECIMAL_PLACES:
        errors.append(f"price must have at most {PRICE_DECIMAL_PLACES} decimal places")
    return errors


def coerce_date(value) -> Optional[date]:
    """Interpret ``value`` as a calendar date, or None when it is not one.

    Accepts ``date``/``datetime`` objects and ISO strings (a time part is
    dropped). Empty or unparsable values mean "no date".
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None
