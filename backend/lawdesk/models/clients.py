# backend/lawdesk/models/clients.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from lawdesk.db.enums import ClientType
from lawdesk.models.common import ORMRead, PartialUpdate


class ClientCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Client or company name")
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    type: ClientType = ClientType.individual
    company_document: Optional[str] = Field(None, description="CNPJ, for companies")
    personal_document: Optional[str] = Field(None, description="CPF, for individuals")
    notes: Optional[str] = None


class ClientUpdate(PartialUpdate):
    not_nullable = ("name", "type")

    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    type: Optional[ClientType] = None
    company_document: Optional[str] = None
    personal_document: Optional[str] = None
    notes: Optional[str] = None


class ClientRead(ORMRead):
    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    type: ClientType
    company_document: Optional[str] = None
    personal_document: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
