# lawdesk/routes/library_routes.py

"""
Reusable text blocks: contract templates (minutas) and standard clauses.
Both are owned by their creator and filtered by category / active flag.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from lawdesk.deps.auth import get_current_user, get_db
from lawdesk.db.models import ContractClause, ContractTemplate, User
from lawdesk.models.contracts import (
    ContractClauseCreate,
    ContractClauseRead,
    ContractClauseUpdate,
    ContractTemplateCreate,
    ContractTemplateRead,
    ContractTemplateUpdate,
)
from lawdesk.services.crud import create_row, delete_row, get_row, list_rows, update_row


templates_router = APIRouter(prefix="/api/contract-templates", tags=["Contract Templates"])
clauses_router = APIRouter(prefix="/api/contract-clauses", tags=["Contract Clauses"])


def _library_query(db: Session, model, category: Optional[str], active: Optional[bool]):
    q = db.query(model)
    if category:
        q = q.filter(model.category == category)
    if active is not None:
        q = q.filter(model.is_active == active)
    return q


# =============================================
# templates
# =============================================
@templates_router.get("", response_model=List[ContractTemplateRead])
def list_templates(
    category: Optional[str] = None,
    active: Optional[bool] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return list_rows(_library_query(db, ContractTemplate, category, active), ContractTemplate)


@templates_router.get("/{template_id}", response_model=ContractTemplateRead)
def get_template(
    template_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    template = get_row(db, ContractTemplate, template_id)
    if not template:
        raise HTTPException(404, "Minuta não encontrada.")
    return template


@templates_router.post("", response_model=ContractTemplateRead, status_code=201)
def create_template(
    req: ContractTemplateCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return create_row(db, ContractTemplate, req.model_dump(), created_by=current_user.id)


@templates_router.patch("/{template_id}", response_model=ContractTemplateRead)
def update_template(
    template_id: str,
    req: ContractTemplateUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    template = update_row(db, ContractTemplate, template_id, req.changes())
    if not template:
        raise HTTPException(404, "Minuta não encontrada.")
    return template


@templates_router.delete("/{template_id}")
def delete_template(
    template_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not delete_row(db, ContractTemplate, template_id):
        raise HTTPException(404, "Minuta não encontrada.")
    return {"message": "Minuta excluída", "template_id": template_id}


# =============================================
# clauses
# =============================================
@clauses_router.get("", response_model=List[ContractClauseRead])
def list_clauses(
    category: Optional[str] = None,
    active: Optional[bool] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return list_rows(_library_query(db, ContractClause, category, active), ContractClause)


@clauses_router.get("/{clause_id}", response_model=ContractClauseRead)
def get_clause(
    clause_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    clause = get_row(db, ContractClause, clause_id)
    if not clause:
        raise HTTPException(404, "Cláusula não encontrada.")
    return clause


@clauses_router.post("", response_model=ContractClauseRead, status_code=201)
def create_clause(
    req: ContractClauseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return create_row(db, ContractClause, req.model_dump(), created_by=current_user.id)


@clauses_router.patch("/{clause_id}", response_model=ContractClauseRead)
def update_clause(
    clause_id: str,
    req: ContractClauseUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    clause = update_row(db, ContractClause, clause_id, req.changes())
    if not clause:
        raise HTTPException(404, "Cláusula não encontrada.")
    return clause


@clauses_router.delete("/{clause_id}")
def delete_clause(
    clause_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not delete_row(db, ContractClause, clause_id):
        raise HTTPException(404, "Cláusula não encontrada.")
    return {"message": "Cláusula excluída", "clause_id": clause_id}
