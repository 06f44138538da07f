"""Password hashing"""
import hashlib
import hmac
import re
import bcrypt

# Hex SHA-256 digests written by the previous browser-only client
_LEGACY_SHA256 = re.compile(r"^[0-9a-f]{64}$")


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")


def is_legacy_hash(hashed_password: str) -> bool:
    return bool(_LEGACY_SHA256.match(hashed_password or ""))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a bcrypt or legacy SHA-256 hash"""
    if not hashed_password:
        return False
    if is_legacy_hash(hashed_password):
        digest = hashlib.sha256(plain_password.encode("utf-8")).hexdigest()
        return hmac.compare_digest(digest, hashed_password)
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash
        return False
