# backend/lawdesk/models/dashboard.py

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    totalRevenue: float = 0.0
    activeContracts: int = 0
    totalClients: int = 0
    pendingTasks: int = 0
    revenueGrowth: float = 0.0
    contractsGrowth: float = 0.0
    clientsGrowth: float = 0.0


class Alert(BaseModel):
    id: str
    type: Literal["warning", "info", "success", "error"]
    title: str
    message: str
    date: datetime


class RevenuePoint(BaseModel):
    month: str = Field(..., description="YYYY-MM")
    income: float = 0.0
    expense: float = 0.0


class UpcomingEvent(BaseModel):
    id: str
    kind: Literal["contract_end", "project_start", "project_end"]
    title: str
    date: datetime
    reference_id: str


class Activity(BaseModel):
    id: str
    entity: Literal["client", "contract", "project", "document", "transaction"]
    title: str
    created_at: datetime
