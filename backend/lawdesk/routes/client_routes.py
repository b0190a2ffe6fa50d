# lawdesk/routes/client_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lawdesk.deps.auth import get_current_user, get_db
from lawdesk.db.enums import ClientType
from lawdesk.db.models import Client, User
from lawdesk.models.clients import ClientCreate, ClientRead, ClientUpdate
from lawdesk.services.crud import create_row, delete_row, get_row, list_rows, update_row


router = APIRouter(prefix="/api/clients", tags=["Clients"])


@router.get("", response_model=List[ClientRead])
def list_clients(
    type: Optional[ClientType] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    q = db.query(Client)
    if type:
        q = q.filter(Client.type == type)
    if search:
        pattern = f"%{search.strip()}%"
        q = q.filter(or_(Client.name.ilike(pattern), Client.email.ilike(pattern)))
    return list_rows(q, Client)


@router.get("/{client_id}", response_model=ClientRead)
def get_client(
    client_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    client = get_row(db, Client, client_id)
    if not client:
        raise HTTPException(404, "Cliente não encontrado.")
    return client


@router.post("", response_model=ClientRead, status_code=201)
def create_client(
    req: ClientCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return create_row(db, Client, req.model_dump())


@router.patch("/{client_id}", response_model=ClientRead)
def update_client(
    client_id: str,
    req: ClientUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    client = update_row(db, Client, client_id, req.changes())
    if not client:
        raise HTTPException(404, "Cliente não encontrado.")
    return client


@router.delete("/{client_id}")
def delete_client(
    client_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        deleted = delete_row(db, Client, client_id)
    except IntegrityError:
        raise HTTPException(409, "Cliente possui contratos, projetos, transações ou documentos vinculados.")

    if not deleted:
        raise HTTPException(404, "Cliente não encontrado.")

    return {"message": "Cliente excluído", "client_id": client_id}
