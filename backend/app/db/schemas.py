"""
Pydantic validation schemas
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from app.db.models import SectionType

# ============================================================================
# User Schemas
# ============================================================================

class UserOut(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

# ============================================================================
# Case Schemas
# ============================================================================

class CaseCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None

class CaseUpdate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None

class CaseResponse(BaseModel):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

# ============================================================================
# Document Schemas
# ============================================================================

class DocumentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    file_url: str = Field(..., min_length=1)
    file_type: str
    file_size: int = Field(..., ge=0)
    section_id: Optional[str] = None
    # Extracted text, used only for summarization and never stored
    content: Optional[str] = None

class DocumentUpdate(BaseModel):
    """
    Omitted fields are left unchanged. `section_id: null` detaches the
    document from its section; `summary: null` clears the summary.
    """
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    section_id: Optional[str] = None
    summary: Optional[str] = None

class DocumentResponse(BaseModel):
    id: str
    case_id: str
    section_id: Optional[str] = None
    name: str
    file_url: str
    file_type: str
    file_size: int
    summary: Optional[str] = None
    uploaded_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class SummaryRequest(BaseModel):
    content: str = Field(..., min_length=1)
    document_id: Optional[str] = None

class SummaryResponse(BaseModel):
    summary: str

# ============================================================================
# Section Schemas
# ============================================================================

class SectionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    type: SectionType
    content: Optional[str] = None

class SectionUpdate(BaseModel):
    """Omitted fields are left unchanged; `content: null` clears the content."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    content: Optional[str] = None
    order: Optional[int] = Field(None, ge=0)

class SectionReorder(BaseModel):
    ordered_section_ids: List[str]

class SectionResponse(BaseModel):
    id: str
    case_id: str
    name: str
    type: SectionType
    content: Optional[str] = None
    order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class SectionWithDocumentsResponse(SectionResponse):
    documents: List[DocumentResponse] = []

class SectionDetailResponse(SectionWithDocumentsResponse):
    user_id: str

class DocumentWithSectionResponse(DocumentResponse):
    section: Optional[SectionResponse] = None

# ============================================================================
# Composite Case Schemas
# ============================================================================

class CaseWithSectionsResponse(CaseResponse):
    sections: List[SectionResponse] = []

class CaseDetailResponse(CaseResponse):
    sections: List[SectionResponse] = []
    documents: List[DocumentResponse] = []
