# lawdesk/routes/user_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lawdesk.core.logger import logger
from lawdesk.deps.auth import get_current_user, get_db, require_admin
from lawdesk.db.models import User
from lawdesk.models.users import ProfileUpdate, RoleUpdate, UserCreate, UserRead
from lawdesk.services.crud import delete_row, update_row
from lawdesk.services.session_service import create_user, normalize_email, set_password


router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=List[UserRead])
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return db.query(User).order_by(User.first_name, User.email).all()


@router.post("", response_model=UserRead, status_code=201)
def create_account(
    req: UserCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    if db.query(User).filter(User.email == normalize_email(req.email)).first():
        raise HTTPException(409, "Já existe um usuário com este e-mail.")

    user = create_user(
        db,
        req.email,
        req.password,
        role=req.role,
        first_name=req.first_name,
        last_name=req.last_name,
        profile_image_url=req.profile_image_url,
    )
    logger.info("user %s created by %s", user.email, admin.email)
    return user


# =============================================
# own profile
# =============================================
@router.patch("/me", response_model=UserRead)
def update_profile(
    req: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    changes = req.changes()
    password = changes.pop("password", None)

    for key, value in changes.items():
        setattr(current_user, key, value)
    if password:
        set_password(current_user, password)

    db.commit()
    db.refresh(current_user)
    return current_user


# =============================================
# admin: role / delete
# =============================================
@router.patch("/{user_id}", response_model=UserRead)
def update_account(
    user_id: str,
    req: RoleUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    user = update_row(db, User, user_id, req.changes())
    if not user:
        raise HTTPException(404, "Usuário não encontrado.")
    return user


@router.delete("/{user_id}")
def delete_account(
    user_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    if user_id == admin.id:
        raise HTTPException(400, "Não é possível excluir o próprio usuário.")

    try:
        deleted = delete_row(db, User, user_id)
    except IntegrityError:
        raise HTTPException(409, "Usuário possui registros vinculados.")

    if not deleted:
        raise HTTPException(404, "Usuário não encontrado.")

    return {"message": "Usuário excluído", "user_id": user_id}
