"""
Section endpoints
"""
from fastapi import APIRouter, Depends

from app.api.v1.deps import get_current_user, get_section_service
from app.db.models import User
from app.db.schemas import SectionDetailResponse, SectionResponse, SectionUpdate
from app.services.section_service import SectionService
from app.utils.updates import instructions_from

router = APIRouter()


@router.get("/{section_id}", response_model=SectionDetailResponse)
def get_section(
    section_id: str,
    current_user: User = Depends(get_current_user),
    sections: SectionService = Depends(get_section_service),
):
    return sections.get_by_id(current_user.id, section_id)


@router.patch("/{section_id}", response_model=SectionResponse)
def update_section(
    section_id: str,
    payload: SectionUpdate,
    current_user: User = Depends(get_current_user),
    sections: SectionService = Depends(get_section_service),
):
    """Only fields present in the body are changed"""
    return sections.update(current_user.id, section_id, **instructions_from(payload))


@router.delete("/{section_id}")
def delete_section(
    section_id: str,
    current_user: User = Depends(get_current_user),
    sections: SectionService = Depends(get_section_service),
):
    sections.delete(current_user.id, section_id)
    return {"success": True, "section_id": section_id}
