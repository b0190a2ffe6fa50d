# lawdesk/routes/transaction_routes.py

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from lawdesk.deps.auth import get_current_user, get_db
from lawdesk.db.enums import TransactionType
from lawdesk.db.models import Transaction, User
from lawdesk.models.finance import (
    TransactionCreate,
    TransactionRead,
    TransactionSummary,
    TransactionUpdate,
)
from lawdesk.services.crud import create_row, delete_row, get_row, update_row
from lawdesk.services.finance_service import summarize


router = APIRouter(prefix="/api/transactions", tags=["Financial"])


# =============================================
# 1) list (newest transaction date first)
# =============================================
@router.get("", response_model=List[TransactionRead])
def list_transactions(
    type: Optional[TransactionType] = None,
    client_id: Optional[str] = None,
    project_id: Optional[str] = None,
    contract_id: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    q = db.query(Transaction)
    if type:
        q = q.filter(Transaction.type == type)
    if client_id:
        q = q.filter(Transaction.client_id == client_id)
    if project_id:
        q = q.filter(Transaction.project_id == project_id)
    if contract_id:
        q = q.filter(Transaction.contract_id == contract_id)
    return q.order_by(Transaction.date.desc(), Transaction.created_at.desc()).all()


# =============================================
# 2) income / expense / balance
# =============================================
@router.get("/summary", response_model=TransactionSummary)
def transaction_summary(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return summarize(db, start, end)


# =============================================
# 3) detail / create / update / delete
# =============================================
@router.get("/{transaction_id}", response_model=TransactionRead)
def get_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    tx = get_row(db, Transaction, transaction_id)
    if not tx:
        raise HTTPException(404, "Transação não encontrada.")
    return tx


@router.post("", response_model=TransactionRead, status_code=201)
def create_transaction(
    req: TransactionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    # date omitted -> column default (now)
    data = req.model_dump(exclude_none=True)
    try:
        return create_row(db, Transaction, data, created_by=current_user.id)
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.patch("/{transaction_id}", response_model=TransactionRead)
def update_transaction(
    transaction_id: str,
    req: TransactionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        tx = update_row(db, Transaction, transaction_id, req.changes())
    except ValueError as e:
        raise HTTPException(400, str(e))

    if not tx:
        raise HTTPException(404, "Transação não encontrada.")
    return tx


@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not delete_row(db, Transaction, transaction_id):
        raise HTTPException(404, "Transação não encontrada.")
    return {"message": "Transação excluída", "transaction_id": transaction_id}
