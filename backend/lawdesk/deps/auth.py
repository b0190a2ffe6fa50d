# lawdesk/deps/auth.py

from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from lawdesk.core.config import settings
from lawdesk.db.database import SessionLocal
from lawdesk.db.enums import UserRole
from lawdesk.db.models import User
from lawdesk.services.session_service import load_session


# =========================
# DB session
# =========================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =========================
# session cookie / bearer sid
# =========================
# auto_error=False: the browser console authenticates with the cookie instead
security = HTTPBearer(auto_error=False)


def get_session_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    sid = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if sid:
        return sid
    if credentials and credentials.credentials:
        return credentials.credentials
    return None


def get_current_user(
    sid: Optional[str] = Depends(get_session_id),
    db: Session = Depends(get_db),
) -> User:
    """
    - the console sends the ``sid`` cookie set by POST /api/login
    - scripts may send ``Authorization: Bearer <sid>`` instead
    - missing, unknown or expired sessions are 401
    """
    record = load_session(db, sid)
    if not record:
        raise HTTPException(status_code=401, detail="Unauthorized")

    user = db.get(User, record.sess.get("user_id"))
    if not user:
        raise HTTPException(status_code=401, detail="Unauthorized")

    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.admin:
        raise HTTPException(status_code=403, detail="Admin role required")
    return current_user
