# lawdesk/routes/document_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from lawdesk.deps.auth import get_current_user, get_db
from lawdesk.db.enums import DocumentStatus
from lawdesk.db.models import Document, User
from lawdesk.models.documents import DocumentCreate, DocumentRead, DocumentUpdate
from lawdesk.services.crud import create_row, delete_row, get_row, list_rows, update_row


router = APIRouter(prefix="/api/documents", tags=["Documents"])


@router.get("", response_model=List[DocumentRead])
def list_documents(
    status: Optional[DocumentStatus] = None,
    type: Optional[str] = None,
    client_id: Optional[str] = None,
    project_id: Optional[str] = None,
    contract_id: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    q = db.query(Document)
    if status:
        q = q.filter(Document.status == status)
    if type:
        q = q.filter(Document.type == type)
    if client_id:
        q = q.filter(Document.client_id == client_id)
    if project_id:
        q = q.filter(Document.project_id == project_id)
    if contract_id:
        q = q.filter(Document.contract_id == contract_id)
    return list_rows(q, Document)


@router.get("/{document_id}", response_model=DocumentRead)
def get_document(
    document_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    doc = get_row(db, Document, document_id)
    if not doc:
        raise HTTPException(404, "Documento não encontrado.")
    return doc


@router.post("", response_model=DocumentRead, status_code=201)
def create_document(
    req: DocumentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return create_row(db, Document, req.model_dump(), uploaded_by=current_user.id)
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.patch("/{document_id}", response_model=DocumentRead)
def update_document(
    document_id: str,
    req: DocumentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        doc = update_row(db, Document, document_id, req.changes())
    except ValueError as e:
        raise HTTPException(400, str(e))

    if not doc:
        raise HTTPException(404, "Documento não encontrado.")
    return doc


@router.delete("/{document_id}")
def delete_document(
    document_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not delete_row(db, Document, document_id):
        raise HTTPException(404, "Documento não encontrado.")
    return {"message": "Documento excluído", "document_id": document_id}
