"""
SQLAlchemy ORM Models
"""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    Text,
    TIMESTAMP,
)
from sqlalchemy.orm import relationship
from sqlalchemy import Index

from app.db.database import Base
from app.utils.helpers import generate_uuid

# ============================================================================
# Enums
# ============================================================================

class SectionType(str, enum.Enum):
    """Section types"""
    CASE_ASSESSMENT = "CASE_ASSESSMENT"
    COUNTER_ARGUMENTS = "COUNTER_ARGUMENTS"
    DISCOVERY_PLAN = "DISCOVERY_PLAN"
    OTHER = "OTHER"


# (name, type, order) for the sections every new case starts with
DEFAULT_SECTIONS = (
    ("Case Assessment", SectionType.CASE_ASSESSMENT, 0),
    ("Counter Arguments", SectionType.COUNTER_ARGUMENTS, 1),
    ("Discovery Plan", SectionType.DISCOVERY_PLAN, 2),
)


# ============================================================================
# Models
# ============================================================================

class User(Base):
    """Account provisioned from the identity provider's session claims"""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)

    # Profile
    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, nullable=True, index=True)
    image = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default="1")

    # Timestamps
    created_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    cases = relationship("Case", back_populates="user", cascade="all, delete-orphan")


class Case(Base):
    """Legal matter owned by one user"""
    __tablename__ = "cases"
    __table_args__ = (
        Index("ix_cases_user_updated", "user_id", "updated_at"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)

    # Foreign Keys
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="cases")
    sections = relationship(
        "Section",
        back_populates="case",
        cascade="all, delete-orphan",
        order_by="Section.order",
    )
    documents = relationship(
        "Document",
        back_populates="case",
        cascade="all, delete-orphan",
        order_by="Document.uploaded_at.desc()",
    )


class Section(Base):
    """Ordered grouping of documents within a case"""
    __tablename__ = "sections"
    __table_args__ = (
        Index("ix_sections_case_order", "case_id", "order"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    case_id = Column(String(36), ForeignKey("cases.id", ondelete="CASCADE"), nullable=False)

    name = Column(String(100), nullable=False)
    type = Column(SQLEnum(SectionType), nullable=False, default=SectionType.OTHER)
    content = Column(Text, nullable=True)
    # Not unique: reorder rewrites every row of a case in one transaction
    order = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    case = relationship("Case", back_populates="sections")
    documents = relationship(
        "Document",
        back_populates="section",
        order_by="Document.uploaded_at.desc()",
    )

    @property
    def user_id(self) -> str:
        return self.case.user_id


class Document(Base):
    """Uploaded file metadata and its AI summary"""
    __tablename__ = "documents"
    __table_args__ = (
        Index("ix_documents_case_uploaded", "case_id", "uploaded_at"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)

    # Foreign Keys
    case_id = Column(String(36), ForeignKey("cases.id", ondelete="CASCADE"), nullable=False)
    section_id = Column(String(36), ForeignKey("sections.id"), nullable=True)

    name = Column(String(255), nullable=False)

    # Storage reference (the bytes live elsewhere)
    file_url = Column(Text, nullable=False)
    file_type = Column(String(255), nullable=False)
    file_size = Column(BigInteger, nullable=False)

    summary = Column(Text, nullable=True)

    # Timestamps
    uploaded_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    case = relationship("Case", back_populates="documents")
    section = relationship("Section", back_populates="documents")
