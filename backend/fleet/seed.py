import os
from sqlalchemy import select
from fleet.db.session import SessionLocal
from fleet.models.user import User
from fleet.core.security import hash_password

def main():
    username = os.environ.get("SEED_ADMIN_USER", "admin")
    password = os.environ.get("SEED_ADMIN_PASS")
    if not password:
        raise SystemExit("SEED_ADMIN_PASS is required")

    db = SessionLocal()
    try:
        existing = db.execute(select(User).where(User.username == username)).scalar_one_or_none()
        if existing:
            return
        db.add(User(username=username, password_hash=hash_password(password), role="admin"))
        db.commit()
    finally:
        db.close()

if __name__ == "__main__":
    main()
