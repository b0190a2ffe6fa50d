# backend/lawdesk/db/models.py

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from lawdesk.db.database import Base
from lawdesk.db.enums import (
    ClientType,
    ContractStatus,
    DocumentStatus,
    ProjectStatus,
    TransactionType,
    UserRole,
)


def utcnow() -> datetime:
    # naive UTC, the way SQLite hands it back
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    return str(uuid.uuid4())


def _enum(enum_cls, name, native=True):
    return Enum(
        enum_cls,
        name=name,
        native_enum=native,
        length=20,
        values_callable=lambda e: [m.value for m in e],
    )


# =========================
# Session table (login state)
# =========================
class SessionRecord(Base):
    __tablename__ = "sessions"

    sid = Column(String, primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(DateTime, nullable=False)

    __table_args__ = (Index("IDX_session_expire", "expire"),)


# =========================
# User table
# =========================
class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String, unique=True)
    first_name = Column(String)
    last_name = Column(String)
    profile_image_url = Column(String)
    role = Column(_enum(UserRole, "user_role"), default=UserRole.assistant)
    password_hash = Column(String)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    contracts = relationship("Contract", back_populates="creator", foreign_keys="Contract.created_by", passive_deletes="all")
    projects = relationship("Project", back_populates="creator", foreign_keys="Project.created_by", passive_deletes="all")
    assigned_projects = relationship("Project", back_populates="assignee", foreign_keys="Project.assigned_to", passive_deletes="all")
    templates = relationship("ContractTemplate", back_populates="creator", passive_deletes="all")
    clauses = relationship("ContractClause", back_populates="creator", passive_deletes="all")
    transactions = relationship("Transaction", back_populates="creator", passive_deletes="all")
    documents = relationship("Document", back_populates="uploader", passive_deletes="all")

    @property
    def full_name(self):
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) or self.email


# =========================
# Client table
# =========================
class Client(Base):
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String)
    phone = Column(String)
    address = Column(Text)
    type = Column(_enum(ClientType, "client_type"), nullable=False, default=ClientType.individual)
    company_document = Column(String)   # CNPJ
    personal_document = Column(String)  # CPF
    notes = Column(Text)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    contracts = relationship("Contract", back_populates="client", passive_deletes="all")
    projects = relationship("Project", back_populates="client", passive_deletes="all")
    transactions = relationship("Transaction", back_populates="client", passive_deletes="all")
    documents = relationship("Document", back_populates="client", passive_deletes="all")


# =========================
# Contract table
# =========================
class Contract(Base):
    __tablename__ = "contracts"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    description = Column(Text)
    client_id = Column(String(36), ForeignKey("clients.id"), index=True)
    value = Column(Numeric(12, 2))
    start_date = Column(DateTime)
    end_date = Column(DateTime)
    status = Column(_enum(ContractStatus, "contract_status"), nullable=False, default=ContractStatus.draft)
    content = Column(Text)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    client = relationship("Client", back_populates="contracts")
    creator = relationship("User", back_populates="contracts", foreign_keys=[created_by])
    transactions = relationship("Transaction", back_populates="contract", passive_deletes="all")
    documents = relationship("Document", back_populates="contract", passive_deletes="all")


# =========================
# Contract templates / clauses
# =========================
class ContractTemplate(Base):
    __tablename__ = "contract_templates"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    description = Column(Text)
    content = Column(Text, nullable=False)
    category = Column(String)
    is_active = Column(Boolean, default=True)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    creator = relationship("User", back_populates="templates")


class ContractClause(Base):
    __tablename__ = "contract_clauses"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String)
    is_active = Column(Boolean, default=True)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    creator = relationship("User", back_populates="clauses")


# =========================
# Project table
# =========================
class Project(Base):
    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    description = Column(Text)
    client_id = Column(String(36), ForeignKey("clients.id"), index=True)
    status = Column(_enum(ProjectStatus, "project_status"), nullable=False, default=ProjectStatus.planning)
    start_date = Column(DateTime)
    end_date = Column(DateTime)
    assigned_to = Column(String(36), ForeignKey("users.id"))
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    client = relationship("Client", back_populates="projects")
    assignee = relationship("User", back_populates="assigned_projects", foreign_keys=[assigned_to])
    creator = relationship("User", back_populates="projects", foreign_keys=[created_by])
    transactions = relationship("Transaction", back_populates="project", passive_deletes="all")
    documents = relationship("Document", back_populates="project", passive_deletes="all")


# =========================
# Financial transactions
# =========================
class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=new_id)
    description = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    type = Column(_enum(TransactionType, "transaction_type", native=False), nullable=False)
    client_id = Column(String(36), ForeignKey("clients.id"), index=True)
    project_id = Column(String(36), ForeignKey("projects.id"), index=True)
    contract_id = Column(String(36), ForeignKey("contracts.id"), index=True)
    date = Column(DateTime, default=utcnow)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=utcnow)

    client = relationship("Client", back_populates="transactions")
    project = relationship("Project", back_populates="transactions")
    contract = relationship("Contract", back_populates="transactions")
    creator = relationship("User", back_populates="transactions")


# =========================
# Documents
# =========================
class Document(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    file_path = Column(String)
    client_id = Column(String(36), ForeignKey("clients.id"), index=True)
    project_id = Column(String(36), ForeignKey("projects.id"), index=True)
    contract_id = Column(String(36), ForeignKey("contracts.id"), index=True)
    status = Column(_enum(DocumentStatus, "document_status", native=False), default=DocumentStatus.active)
    uploaded_by = Column(String(36), ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    client = relationship("Client", back_populates="documents")
    project = relationship("Project", back_populates="documents")
    contract = relationship("Contract", back_populates="documents")
    uploader = relationship("User", back_populates="documents")
