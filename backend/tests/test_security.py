from datetime import datetime, timedelta, timezone

import jwt
import pytest
from pydantic import ValidationError

from fleet.core.config import Settings, settings
from fleet.core.security import hash_password, verify_password, create_access_token, decode_token


def test_hash_is_salted_and_verifies():
    h1 = hash_password("hunter22")
    h2 = hash_password("hunter22")
    assert h1 != h2
    assert h1 != "hunter22"
    assert verify_password("hunter22", h1)
    assert not verify_password("hunter23", h1)


def test_verify_rejects_missing_values():
    assert not verify_password(None, hash_password("x"))
    assert not verify_password("x", None)


def test_long_passwords_compare_on_first_72_bytes():
    base = "a" * 72
    h = hash_password(base + "tail-one")
    assert verify_password(base + "tail-two", h)


def test_token_carries_user_id():
    claims = decode_token(create_access_token(42))
    assert claims["sub"] == "42"
    assert claims["id"] == 42
    assert claims["exp"] - claims["iat"] == 24 * 60 * 60


def test_token_valid_just_before_expiry():
    issued = datetime.now(timezone.utc) - timedelta(hours=23, minutes=59)
    assert decode_token(create_access_token(7, now=issued))["id"] == 7


def test_token_rejected_after_expiry():
    issued = datetime.now(timezone.utc) - timedelta(hours=24, minutes=1)
    with pytest.raises(jwt.ExpiredSignatureError):
        decode_token(create_access_token(7, now=issued))


def test_token_signed_with_other_secret_rejected():
    forged = jwt.encode({"sub": "1", "id": 1}, "not-" + settings.jwt_secret, algorithm="HS256")
    with pytest.raises(jwt.InvalidSignatureError):
        decode_token(forged)


def test_malformed_token_rejected():
    with pytest.raises(jwt.DecodeError):
        decode_token("not-a-token")


def test_postgres_urls_use_psycopg_driver():
    st = Settings(_env_file=None, database_url="postgres://u:p@db:5432/fleet", jwt_secret="x")
    assert st.database_url == "postgresql+psycopg://u:p@db:5432/fleet"
    st = Settings(_env_file=None, database_url="postgresql://u:p@db/fleet", jwt_secret="x")
    assert st.database_url == "postgresql+psycopg://u:p@db/fleet"


def test_secret_has_no_default(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, database_url="sqlite://")


def test_blank_secret_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, database_url="sqlite://", jwt_secret="  ")


def test_token_without_expiry_rejected():
    unbounded = jwt.encode({"sub": "1", "id": 1, "iat": 0}, settings.jwt_secret, algorithm="HS256")
    with pytest.raises(jwt.MissingRequiredClaimError):
        decode_token(unbounded)


def test_token_without_subject_rejected():
    issued = datetime.now(timezone.utc)
    anonymous = jwt.encode(
        {"iat": int(issued.timestamp()), "exp": int((issued + timedelta(hours=1)).timestamp())},
        settings.jwt_secret,
        algorithm="HS256",
    )
    with pytest.raises(jwt.MissingRequiredClaimError):
        decode_token(anonymous)
