# backend/lawdesk/models/finance.py

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from lawdesk.db.enums import TransactionType
from lawdesk.models.common import ORMRead, PartialUpdate


class TransactionCreate(BaseModel):
    description: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    type: TransactionType
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    contract_id: Optional[str] = None
    date: Optional[datetime] = Field(None, description="Defaults to now")


class TransactionUpdate(PartialUpdate):
    not_nullable = ("description", "amount", "type", "date")

    description: Optional[str] = Field(None, min_length=1)
    amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    type: Optional[TransactionType] = None
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    contract_id: Optional[str] = None
    date: Optional[datetime] = None


class TransactionRead(ORMRead):
    id: str
    description: str
    amount: Decimal
    type: TransactionType
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    contract_id: Optional[str] = None
    date: Optional[datetime] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None


class TransactionSummary(BaseModel):
    income: Decimal
    expense: Decimal
    balance: Decimal
