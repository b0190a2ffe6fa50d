# backend/lawdesk/services/crud.py

from __future__ import annotations

from typing import Dict, List, Optional, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from lawdesk.core.logger import logger
from lawdesk.db.database import Base
from lawdesk.db.models import Client, Contract, Project, User

# payload field -> table it must point at
REFERENCE_TARGETS: Dict[str, Type[Base]] = {
    "client_id": Client,
    "project_id": Project,
    "contract_id": Contract,
    "assigned_to": User,
}


# ======================================================================================
# 1) reference checks
# ======================================================================================
def check_references(db: Session, data: dict) -> None:
    """
    Raise ValueError when a foreign key in ``data`` points at a missing row.
    None means "no reference" and is always accepted.
    """
    for field, model in REFERENCE_TARGETS.items():
        ref_id = data.get(field)
        if ref_id is None:
            continue
        if db.get(model, ref_id) is None:
            raise ValueError(f"{field} '{ref_id}' does not exist")


# ======================================================================================
# 2) list / get
# ======================================================================================
def list_rows(query: Query, model: Type[Base]) -> List[Base]:
    return query.order_by(model.created_at.desc()).all()


def get_row(db: Session, model: Type[Base], row_id: str) -> Optional[Base]:
    return db.get(model, row_id)


# ======================================================================================
# 3) create / update
# ======================================================================================
def create_row(db: Session, model: Type[Base], data: dict, **owner) -> Base:
    check_references(db, data)

    row = model(**data, **owner)
    db.add(row)
    db.commit()
    db.refresh(row)

    logger.info("created %s %s", model.__tablename__, row.id)
    return row


def update_row(db: Session, model: Type[Base], row_id: str, changes: dict) -> Optional[Base]:
    row = db.get(model, row_id)
    if not row:
        return None

    check_references(db, changes)

    for key, value in changes.items():
        setattr(row, key, value)

    db.commit()
    db.refresh(row)
    return row


# ======================================================================================
# 4) delete
# ======================================================================================
def delete_row(db: Session, model: Type[Base], row_id: str) -> bool:
    """
    False when the row does not exist. A row still referenced elsewhere
    raises sqlalchemy IntegrityError; the session is rolled back first.
    """
    row = db.get(model, row_id)
    if not row:
        return False

    db.delete(row)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise

    logger.info("deleted %s %s", model.__tablename__, row_id)
    return True
