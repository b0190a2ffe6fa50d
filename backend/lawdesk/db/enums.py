# backend/lawdesk/db/enums.py

import enum


class UserRole(str, enum.Enum):
    admin = "admin"
    lawyer = "lawyer"
    assistant = "assistant"


class ClientType(str, enum.Enum):
    individual = "individual"
    company = "company"


class ContractStatus(str, enum.Enum):
    draft = "draft"
    active = "active"
    completed = "completed"
    cancelled = "cancelled"


class ProjectStatus(str, enum.Enum):
    planning = "planning"
    active = "active"
    on_hold = "on_hold"
    completed = "completed"
    cancelled = "cancelled"


class TransactionType(str, enum.Enum):
    income = "income"
    expense = "expense"


class DocumentStatus(str, enum.Enum):
    active = "active"
    archived = "archived"
    draft = "draft"
