# backend/lawdesk/services/session_service.py

from __future__ import annotations

import secrets
from datetime import timedelta
from typing import Optional

from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from lawdesk.core.config import settings
from lawdesk.core.logger import logger
from lawdesk.db.enums import UserRole
from lawdesk.db.models import SessionRecord, User, utcnow


def normalize_email(email: str) -> str:
    return email.lower().strip()


# ======================================================================================
# 1) users / passwords
# ======================================================================================
def create_user(
    db: Session,
    email: str,
    password: str,
    role: UserRole = UserRole.assistant,
    **profile,
) -> User:
    user = User(
        email=normalize_email(email),
        password_hash=generate_password_hash(password),
        role=role,
        **profile,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def set_password(user: User, password: str) -> None:
    user.password_hash = generate_password_hash(password)


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if not user or not user.password_hash:
        return None
    if not check_password_hash(user.password_hash, password):
        return None
    return user


def ensure_bootstrap_admin(db: Session, email: Optional[str], password: Optional[str]) -> Optional[User]:
    """Create the first admin account from settings when it does not exist yet."""
    if not email or not password:
        return None

    existing = db.query(User).filter(User.email == normalize_email(email)).first()
    if existing:
        return existing

    user = create_user(db, email, password, role=UserRole.admin)
    logger.info("bootstrap admin created: %s", user.email)
    return user


# ======================================================================================
# 2) sessions
# ======================================================================================
def create_session(db: Session, user: User) -> SessionRecord:
    now = utcnow()
    record = SessionRecord(
        sid=secrets.token_urlsafe(32),
        sess={"user_id": user.id, "login_at": now.isoformat()},
        expire=now + timedelta(days=settings.SESSION_TTL_DAYS),
    )
    db.add(record)
    db.commit()
    return record


def load_session(db: Session, sid: Optional[str]) -> Optional[SessionRecord]:
    """Return the live session for ``sid``; expired rows are deleted on sight."""
    if not sid:
        return None

    record = db.get(SessionRecord, sid)
    if not record:
        return None

    if record.expire <= utcnow():
        logger.info("session expired for user %s", record.sess.get("user_id"))
        db.delete(record)
        db.commit()
        return None

    return record


def destroy_session(db: Session, sid: Optional[str]) -> bool:
    if not sid:
        return False
    deleted = db.query(SessionRecord).filter(SessionRecord.sid == sid).delete()
    db.commit()
    return bool(deleted)


def prune_expired_sessions(db: Session) -> int:
    deleted = db.query(SessionRecord).filter(SessionRecord.expire <= utcnow()).delete()
    db.commit()
    return deleted
