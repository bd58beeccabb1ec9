import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fleet.core.errors import DuplicateUsername, UserNotFound, WrongPassword
from fleet.core.security import hash_password, verify_password, create_access_token
from fleet.models.user import User

logger = logging.getLogger(__name__)


def register(s: Session, username: str, password: str) -> User:
    user = User(username=username, password_hash=hash_password(password))
    s.add(user)
    try:
        s.commit()
    except IntegrityError:
        # username uniqueness is enforced by the table
        s.rollback()
        raise DuplicateUsername()
    s.refresh(user)
    logger.info("registered user %s", username)
    return user


def login(s: Session, username: str, password: str) -> str:
    u = s.execute(select(User).where(User.username == username)).scalar_one_or_none()
    if not u:
        logger.info("login failed for %s: unknown user", username)
        raise UserNotFound()
    if not verify_password(password, u.password_hash):
        logger.info("login failed for %s: wrong password", username)
        raise WrongPassword()
    return create_access_token(u.id)
