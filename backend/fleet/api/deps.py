import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fleet.db.session import SessionLocal
from fleet.core.errors import NoToken, InvalidToken
from fleet.core.security import decode_token

bearer = HTTPBearer(auto_error=False)

def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()

def current_user(request: Request, creds: HTTPAuthorizationCredentials | None = Depends(bearer)):
    if creds is None:
        # a header with some other scheme is a bad token, not a missing one
        if request.headers.get("authorization"):
            raise InvalidToken()
        raise NoToken()
    try:
        return decode_token(creds.credentials)
    except jwt.PyJWTError:
        raise InvalidToken()
