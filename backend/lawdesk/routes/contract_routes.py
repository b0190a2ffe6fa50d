# lawdesk/routes/contract_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lawdesk.deps.auth import get_current_user, get_db
from lawdesk.db.enums import ContractStatus
from lawdesk.db.models import Contract, User
from lawdesk.models.contracts import ContractCreate, ContractRead, ContractUpdate
from lawdesk.services.crud import create_row, delete_row, get_row, list_rows, update_row


router = APIRouter(prefix="/api/contracts", tags=["Contracts"])


# =============================================
# 1) list
# =============================================
@router.get("", response_model=List[ContractRead])
def list_contracts(
    status: Optional[ContractStatus] = None,
    client_id: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    q = db.query(Contract)
    if status:
        q = q.filter(Contract.status == status)
    if client_id:
        q = q.filter(Contract.client_id == client_id)
    return list_rows(q, Contract)


# =============================================
# 2) detail
# =============================================
@router.get("/{contract_id}", response_model=ContractRead)
def get_contract(
    contract_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    contract = get_row(db, Contract, contract_id)
    if not contract:
        raise HTTPException(404, "Contrato não encontrado.")
    return contract


# =============================================
# 3) create
# =============================================
@router.post("", response_model=ContractRead, status_code=201)
def create_contract(
    req: ContractCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return create_row(db, Contract, req.model_dump(), created_by=current_user.id)
    except ValueError as e:
        raise HTTPException(400, str(e))


# =============================================
# 4) partial update
# =============================================
@router.patch("/{contract_id}", response_model=ContractRead)
def update_contract(
    contract_id: str,
    req: ContractUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        contract = update_row(db, Contract, contract_id, req.changes())
    except ValueError as e:
        raise HTTPException(400, str(e))

    if not contract:
        raise HTTPException(404, "Contrato não encontrado.")
    return contract


# =============================================
# 5) delete
# =============================================
@router.delete("/{contract_id}")
def delete_contract(
    contract_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        deleted = delete_row(db, Contract, contract_id)
    except IntegrityError:
        raise HTTPException(409, "Contrato possui transações ou documentos vinculados.")

    if not deleted:
        raise HTTPException(404, "Contrato não encontrado.")

    return {"message": "Contrato excluído", "contract_id": contract_id}
