"""Tests for password hashing and JWT tokens"""
import hashlib
from datetime import timedelta

from sdh_inventory.infrastructure.security.jwt import create_access_token, decode_access_token
from sdh_inventory.infrastructure.security.passwords import hash_password, is_legacy_hash, verify_password


def test_bcrypt_hash_verifies():
    hashed = hash_password("hasici-2024")

    assert hashed != "hasici-2024"
    assert not is_legacy_hash(hashed)
    assert verify_password("hasici-2024", hashed)
    assert not verify_password("hasici-2025", hashed)


def test_legacy_sha256_hash_verifies():
    legacy = hashlib.sha256("admin".encode("utf-8")).hexdigest()

    assert is_legacy_hash(legacy)
    assert verify_password("admin", legacy)
    assert not verify_password("Admin", legacy)


def test_garbage_hash_never_verifies():
    assert not verify_password("anything", "")
    assert not verify_password("anything", "not-a-hash")


def test_token_round_trip():
    token = create_access_token({"sub": "user-1", "role": "ADMIN"})

    payload = decode_access_token(token)

    assert payload["sub"] == "user-1"
    assert payload["role"] == "ADMIN"


def test_expired_or_tampered_token():
    expired = create_access_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-10))
    tampered = create_access_token({"sub": "user-1"})[:-2] + "xx"

    assert decode_access_token(expired) is None
    assert decode_access_token(tampered) is None
