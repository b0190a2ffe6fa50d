# lawdesk/routes/project_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lawdesk.deps.auth import get_current_user, get_db
from lawdesk.db.enums import ProjectStatus
from lawdesk.db.models import Project, User
from lawdesk.models.projects import ProjectCreate, ProjectRead, ProjectUpdate
from lawdesk.services.crud import create_row, delete_row, get_row, list_rows, update_row


router = APIRouter(prefix="/api/projects", tags=["Projects"])


@router.get("", response_model=List[ProjectRead])
def list_projects(
    status: Optional[ProjectStatus] = None,
    client_id: Optional[str] = None,
    assigned_to: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    q = db.query(Project)
    if status:
        q = q.filter(Project.status == status)
    if client_id:
        q = q.filter(Project.client_id == client_id)
    if assigned_to:
        q = q.filter(Project.assigned_to == assigned_to)
    return list_rows(q, Project)


@router.get("/{project_id}", response_model=ProjectRead)
def get_project(
    project_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    project = get_row(db, Project, project_id)
    if not project:
        raise HTTPException(404, "Projeto não encontrado.")
    return project


@router.post("", response_model=ProjectRead, status_code=201)
def create_project(
    req: ProjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return create_row(db, Project, req.model_dump(), created_by=current_user.id)
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.patch("/{project_id}", response_model=ProjectRead)
def update_project(
    project_id: str,
    req: ProjectUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        project = update_row(db, Project, project_id, req.changes())
    except ValueError as e:
        raise HTTPException(400, str(e))

    if not project:
        raise HTTPException(404, "Projeto não encontrado.")
    return project


@router.delete("/{project_id}")
def delete_project(
    project_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        deleted = delete_row(db, Project, project_id)
    except IntegrityError:
        raise HTTPException(409, "Projeto possui transações ou documentos vinculados.")

    if not deleted:
        raise HTTPException(404, "Projeto não encontrado.")

    return {"message": "Projeto excluído", "project_id": project_id}
