"""
Case management endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, status

from app.api.v1.deps import (
    get_case_service,
    get_current_user,
    get_document_service,
    get_section_service,
)
from app.db.models import User
from app.db.schemas import (
    CaseCreate,
    CaseDetailResponse,
    CaseResponse,
    CaseUpdate,
    CaseWithSectionsResponse,
    DocumentCreate,
    DocumentResponse,
    DocumentWithSectionResponse,
    SectionCreate,
    SectionReorder,
    SectionResponse,
    SectionWithDocumentsResponse,
)
from app.services.case_service import CaseService
from app.services.document_service import DocumentService
from app.services.section_service import SectionService

router = APIRouter()

# ============================================================================
# Cases
# ============================================================================

@router.get("/", response_model=List[CaseResponse])
def get_cases(
    current_user: User = Depends(get_current_user),
    cases: CaseService = Depends(get_case_service),
):
    """Get all cases for the authenticated user, most recently updated first"""
    return cases.list_for_user(current_user.id)


@router.post("/", response_model=CaseWithSectionsResponse, status_code=status.HTTP_201_CREATED)
def create_case(
    payload: CaseCreate,
    current_user: User = Depends(get_current_user),
    cases: CaseService = Depends(get_case_service),
):
    """Create a case with its three default sections"""
    return cases.create(current_user.id, payload.title, payload.description)


@router.get("/{case_id}", response_model=CaseDetailResponse)
def get_case(
    case_id: str,
    current_user: User = Depends(get_current_user),
    cases: CaseService = Depends(get_case_service),
):
    return cases.get_by_id(current_user.id, case_id)


@router.put("/{case_id}", response_model=CaseResponse)
def update_case(
    case_id: str,
    payload: CaseUpdate,
    current_user: User = Depends(get_current_user),
    cases: CaseService = Depends(get_case_service),
):
    return cases.update(current_user.id, case_id, payload.title, payload.description)


@router.delete("/{case_id}")
def delete_case(
    case_id: str,
    current_user: User = Depends(get_current_user),
    cases: CaseService = Depends(get_case_service),
):
    cases.delete(current_user.id, case_id)
    return {"success": True, "case_id": case_id}

# ============================================================================
# Sections of a case
# ============================================================================

@router.get("/{case_id}/sections", response_model=List[SectionWithDocumentsResponse])
def get_case_sections(
    case_id: str,
    current_user: User = Depends(get_current_user),
    sections: SectionService = Depends(get_section_service),
):
    return sections.list_by_case_id(current_user.id, case_id)


@router.post(
    "/{case_id}/sections",
    response_model=SectionResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_section(
    case_id: str,
    payload: SectionCreate,
    current_user: User = Depends(get_current_user),
    sections: SectionService = Depends(get_section_service),
):
    """Append a section at the end of the case"""
    return sections.create(current_user.id, case_id, payload.name, payload.type, payload.content)


@router.put("/{case_id}/sections/order")
def reorder_sections(
    case_id: str,
    payload: SectionReorder,
    current_user: User = Depends(get_current_user),
    sections: SectionService = Depends(get_section_service),
):
    sections.reorder(current_user.id, case_id, payload.ordered_section_ids)
    return {"success": True}

# ============================================================================
# Documents of a case
# ============================================================================

@router.get("/{case_id}/documents", response_model=List[DocumentWithSectionResponse])
def get_case_documents(
    case_id: str,
    current_user: User = Depends(get_current_user),
    documents: DocumentService = Depends(get_document_service),
):
    return documents.list_by_case_id(current_user.id, case_id)


@router.post(
    "/{case_id}/documents",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_document(
    case_id: str,
    payload: DocumentCreate,
    current_user: User = Depends(get_current_user),
    documents: DocumentService = Depends(get_document_service),
):
    """
    Record metadata for a file that is already in storage.
    `content` (extracted text) triggers a best-effort summary.
    """
    return documents.create(
        current_user.id,
        case_id,
        name=payload.name,
        file_url=payload.file_url,
        file_type=payload.file_type,
        file_size=payload.file_size,
        section_id=payload.section_id,
        content=payload.content,
    )
