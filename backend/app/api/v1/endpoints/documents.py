"""
Document management endpoints
"""
from fastapi import APIRouter, Depends

from app.api.v1.deps import get_current_user, get_document_service
from app.db.models import User
from app.db.schemas import DocumentResponse, DocumentUpdate, SummaryRequest, SummaryResponse
from app.services.document_service import DocumentService
from app.utils.updates import instructions_from

router = APIRouter()

# ============================================================================
# Endpoints
# ============================================================================

@router.post("/summary", response_model=SummaryResponse)
def generate_summary(
    payload: SummaryRequest,
    current_user: User = Depends(get_current_user),
    documents: DocumentService = Depends(get_document_service),
):
    """
    Summarize text on demand. With `document_id` the result is also stored
    on that document. Summarizer failures return 500.
    """
    summary = documents.generate_summary(current_user.id, payload.content, payload.document_id)
    return {"summary": summary}


@router.get("/{document_id}", response_model=DocumentResponse)
def get_document(
    document_id: str,
    current_user: User = Depends(get_current_user),
    documents: DocumentService = Depends(get_document_service),
):
    """Get document details by ID"""
    return documents.get_by_id(current_user.id, document_id)


@router.patch("/{document_id}", response_model=DocumentResponse)
def update_document(
    document_id: str,
    payload: DocumentUpdate,
    current_user: User = Depends(get_current_user),
    documents: DocumentService = Depends(get_document_service),
):
    """Update document metadata; `section_id: null` detaches it from its section"""
    return documents.update(current_user.id, document_id, **instructions_from(payload))


@router.delete("/{document_id}")
def delete_document(
    document_id: str,
    current_user: User = Depends(get_current_user),
    documents: DocumentService = Depends(get_document_service),
):
    """Delete the record only; the stored file is not touched"""
    documents.delete(current_user.id, document_id)
    return {"success": True, "document_id": document_id}
