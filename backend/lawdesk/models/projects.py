# backend/lawdesk/models/projects.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from lawdesk.db.enums import ProjectStatus
from lawdesk.models.common import ORMRead, PartialUpdate


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    client_id: Optional[str] = None
    status: ProjectStatus = ProjectStatus.planning
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    assigned_to: Optional[str] = Field(None, description="User id of the responsible lawyer")


class ProjectUpdate(PartialUpdate):
    not_nullable = ("name", "status")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    client_id: Optional[str] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    assigned_to: Optional[str] = None


class ProjectRead(ORMRead):
    id: str
    name: str
    description: Optional[str] = None
    client_id: Optional[str] = None
    status: ProjectStatus
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    assigned_to: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
