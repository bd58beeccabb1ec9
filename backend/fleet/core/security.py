from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

from fleet.core.config import settings

pwd = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)

def _clip(p: str) -> str:
    # bcrypt only looks at the first 72 bytes
    p = str(p)
    b = p.encode("utf-8")
    if len(b) > 72:
        p = b[:72].decode("utf-8", errors="ignore")
    return p

def hash_password(p: str) -> str:
    if p is None:
        raise ValueError("password is required")
    return pwd.hash(_clip(p))

def verify_password(p: str, hashed: str) -> bool:
    if p is None or hashed is None:
        return False
    return pwd.verify(_clip(p), hashed)

def create_access_token(user_id: int, now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "id": user_id,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=settings.jwt_expires_min)).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_alg)

def decode_token(token: str) -> dict:
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_alg],
        options={"require": ["exp", "iat", "sub"]},
    )
