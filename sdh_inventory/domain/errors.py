"""Domain errors"""


class InventoryError(Exception):
    """Base class for inventory domain errors"""


class ValidationError(InventoryError, ValueError):
    """Input has the wrong shape or is out of range"""


class NotFoundError(InventoryError, LookupError):
    """Referenced record does not exist"""


class PersistenceError(InventoryError):
    """Store is unreachable or rejected the write"""


class DuplicateRecordError(PersistenceError):
    """Store rejected the write because of a uniqueness conflict"""
