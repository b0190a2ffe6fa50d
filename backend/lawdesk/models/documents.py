# backend/lawdesk/models/documents.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from lawdesk.db.enums import DocumentStatus
from lawdesk.models.common import ORMRead, PartialUpdate


class DocumentCreate(BaseModel):
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="petição, procuração, contrato, ...")
    file_path: Optional[str] = None
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    contract_id: Optional[str] = None
    status: DocumentStatus = DocumentStatus.active


class DocumentUpdate(PartialUpdate):
    not_nullable = ("name", "type")

    name: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1)
    file_path: Optional[str] = None
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    contract_id: Optional[str] = None
    status: Optional[DocumentStatus] = None


class DocumentRead(ORMRead):
    id: str
    name: str
    type: str
    file_path: Optional[str] = None
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    contract_id: Optional[str] = None
    status: Optional[DocumentStatus] = None
    uploaded_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
