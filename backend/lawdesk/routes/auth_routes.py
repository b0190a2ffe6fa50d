# lawdesk/routes/auth_routes.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from lawdesk.core.config import settings
from lawdesk.core.logger import logger
from lawdesk.deps.auth import get_db, get_session_id
from lawdesk.db.models import User
from lawdesk.models.users import LoginRequest, UserRead
from lawdesk.services.session_service import (
    authenticate,
    create_session,
    destroy_session,
    load_session,
)

router = APIRouter(prefix="/api", tags=["Auth"])


def _set_session_cookie(response: Response, sid: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sid,
        max_age=settings.SESSION_TTL_DAYS * 24 * 3600,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


# =============================================
# 1) login
# =============================================
@router.get("/login")
def login_page():
    """The login form lives on the console landing page."""
    return RedirectResponse(url=settings.CONSOLE_URL, status_code=307)


@router.post("/login", response_model=UserRead)
def login(
    req: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    user = authenticate(db, req.email, req.password)
    if not user:
        logger.info("login failed for %s", req.email)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    record = create_session(db, user)
    _set_session_cookie(response, record.sid)

    logger.info("login ok: %s <%s>", user.full_name, user.email)
    return user


# =============================================
# 2) logout
# =============================================
@router.get("/logout")
def logout_redirect(
    sid: Optional[str] = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    if destroy_session(db, sid):
        logger.info("logout")
    response = RedirectResponse(url=settings.CONSOLE_URL, status_code=307)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response


@router.post("/logout")
def logout(
    response: Response,
    sid: Optional[str] = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    if destroy_session(db, sid):
        logger.info("logout")
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out"}


# =============================================
# 3) current user
# =============================================
@router.get("/auth/user", response_model=UserRead)
def auth_user(
    sid: Optional[str] = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    record = load_session(db, sid)
    user = db.get(User, record.sess.get("user_id")) if record else None
    if not user:
        return JSONResponse(status_code=401, content={"message": "Unauthorized"})
    return user
