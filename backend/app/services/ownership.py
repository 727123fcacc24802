# app/services/ownership.py
"""
Ownership checks shared by every case, section and document operation.

Each helper loads the target row, walks up to the owning user and compares
it with the acting user:

    Case     -> user_id
    Section  -> Case -> user_id
    Document -> Case -> user_id

A missing row raises NotFoundError; a row owned by somebody else raises
UnauthorizedError. The loaded row is returned so callers do not query twice.
"""
from typing import Optional, Sequence

from sqlalchemy.orm import Session, joinedload

from app.db.models import Case, Document, Section
from app.utils.exceptions import NotFoundError, UnauthorizedError


def ensure_case_owner(
    db: Session,
    user_id: str,
    case_id: str,
    action: str = "access this case",
    options: Optional[Sequence] = None,
) -> Case:
    query = db.query(Case)
    if options:
        query = query.options(*options)
    case = query.filter(Case.id == case_id).first()
    if not case:
        raise NotFoundError("Case", case_id)
    if case.user_id != user_id:
        raise UnauthorizedError(action)
    return case


def ensure_section_owner(
    db: Session,
    user_id: str,
    section_id: str,
    action: str = "access this section",
    options: Optional[Sequence] = None,
) -> Section:
    query = db.query(Section).options(joinedload(Section.case))
    if options:
        query = query.options(*options)
    section = query.filter(Section.id == section_id).first()
    if not section:
        raise NotFoundError("Section", section_id)
    if section.case.user_id != user_id:
        raise UnauthorizedError(action)
    return section


def ensure_document_owner(
    db: Session,
    user_id: str,
    document_id: str,
    action: str = "access this document",
) -> Document:
    document = (
        db.query(Document)
        .options(joinedload(Document.case))
        .filter(Document.id == document_id)
        .first()
    )
    if not document:
        raise NotFoundError("Document", document_id)
    if document.case.user_id != user_id:
        raise UnauthorizedError(action)
    return document
