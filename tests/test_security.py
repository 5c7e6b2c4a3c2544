import jwt

from app.core.config import settings
from app.core.security import (
    REFRESH_TOKEN_TYPE,
    create_access_token,
    create_refresh_token,
    get_password_hash,
    verify_password,
    verify_token,
)


def test_password_hash_roundtrip():
    hashed = get_password_hash("reunion-2025")
    assert hashed != "reunion-2025"
    assert verify_password("reunion-2025", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_password_with_garbage_hash():
    assert not verify_password("anything", "not-a-bcrypt-hash")


def test_access_token_payload():
    payload = verify_token(create_access_token("user-1", version=3))
    assert payload["sub"] == "user-1"
    assert payload["ver"] == 3


def test_token_type_is_enforced():
    refresh = create_refresh_token("user-1")
    assert verify_token(refresh) is None
    assert verify_token(refresh, token_type=REFRESH_TOKEN_TYPE)["sub"] == "user-1"


def test_tampered_token_rejected():
    forged = jwt.encode({"sub": "user-1", "type": "access"}, "other-key", algorithm="HS256")
    assert verify_token(forged) is None


def test_expired_token_rejected(monkeypatch):
    monkeypatch.setattr(settings, "ACCESS_TOKEN_EXPIRE_MINUTES", -1)
    assert verify_token(create_access_token("user-1")) is None
