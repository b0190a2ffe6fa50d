# backend/lawdesk/models/contracts.py

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from lawdesk.db.enums import ContractStatus
from lawdesk.models.common import ORMRead, PartialUpdate


# =========================
# Contracts
# =========================
class ContractCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    client_id: Optional[str] = None
    value: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: ContractStatus = ContractStatus.draft
    content: Optional[str] = Field(None, description="Full contract text")


class ContractUpdate(PartialUpdate):
    not_nullable = ("title", "status")

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    client_id: Optional[str] = None
    value: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[ContractStatus] = None
    content: Optional[str] = None


class ContractRead(ORMRead):
    id: str
    title: str
    description: Optional[str] = None
    client_id: Optional[str] = None
    value: Optional[Decimal] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: ContractStatus
    content: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =========================
# Templates (minutas)
# =========================
class ContractTemplateCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    content: str = Field(..., min_length=1)
    category: Optional[str] = None
    is_active: bool = True


class ContractTemplateUpdate(PartialUpdate):
    not_nullable = ("name", "content")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    is_active: Optional[bool] = None


class ContractTemplateRead(ORMRead):
    id: str
    name: str
    description: Optional[str] = None
    content: str
    category: Optional[str] = None
    is_active: Optional[bool] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =========================
# Clauses
# =========================
class ContractClauseCreate(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    category: Optional[str] = None
    is_active: bool = True


class ContractClauseUpdate(PartialUpdate):
    not_nullable = ("title", "content")

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    is_active: Optional[bool] = None


class ContractClauseRead(ORMRead):
    id: str
    title: str
    content: str
    category: Optional[str] = None
    is_active: Optional[bool] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
