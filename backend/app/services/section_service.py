# app/services/section_service.py

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from app.core.logger import logger
from app.db.models import Document, Section, SectionType
from app.services.ownership import ensure_case_owner, ensure_section_owner
from app.utils.exceptions import BadRequestError
from app.utils.updates import UNCHANGED, Clear, FieldUpdate, Set, apply_update
from app.utils.validators import validate_length, validate_section_type


class SectionService:
    """
    Service layer for the ordered sections of a case.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_by_case_id(self, user_id: str, case_id: str) -> List[Section]:
        """
        Sections of an owned case in display order, documents attached.
        """
        ensure_case_owner(self.db, user_id, case_id)
        return (
            self.db.query(Section)
            .options(selectinload(Section.documents))
            .filter(Section.case_id == case_id)
            .order_by(Section.order.asc())
            .all()
        )

    def get_by_id(self, user_id: str, section_id: str) -> Section:
        return ensure_section_owner(
            self.db,
            user_id,
            section_id,
            options=[selectinload(Section.documents)],
        )

    def create(
        self,
        user_id: str,
        case_id: str,
        name: str,
        type: SectionType,
        content: Optional[str] = None,
    ) -> Section:
        """
        Append a new section after the case's current last section.
        """
        validate_length(name, "Name")
        section_type = validate_section_type(type)
        ensure_case_owner(self.db, user_id, case_id, action="add sections to this case")

        highest_order = (
            self.db.query(func.max(Section.order))
            .filter(Section.case_id == case_id)
            .scalar()
        )
        order = (highest_order if highest_order is not None else -1) + 1

        try:
            section = Section(
                case_id=case_id,
                name=name,
                type=section_type,
                content=content,
                order=order,
            )
            self.db.add(section)
            self.db.commit()
            self.db.refresh(section)

            logger.info(f"Section created: {section.id} at order {order} in case {case_id}")
            return section

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create section: {str(e)}")
            raise

    def update(
        self,
        user_id: str,
        section_id: str,
        name: FieldUpdate = UNCHANGED,
        content: FieldUpdate = UNCHANGED,
        order: FieldUpdate = UNCHANGED,
    ) -> Section:
        """
        Partial update. `name` and `order` can be set but not cleared;
        `content` can be set or cleared.
        """
        if isinstance(name, Clear):
            raise BadRequestError("Section name cannot be cleared")
        if isinstance(order, Clear):
            raise BadRequestError("Section order cannot be cleared")
        if isinstance(name, Set):
            validate_length(name.value, "Name")
        if isinstance(order, Set) and order.value < 0:
            raise BadRequestError("Section order must be zero or greater")

        section = ensure_section_owner(self.db, user_id, section_id, action="update this section")
        try:
            apply_update(section, "name", name)
            apply_update(section, "content", content)
            apply_update(section, "order", order)
            self.db.commit()
            self.db.refresh(section)

            logger.info(f"Section updated: {section.id}")
            return section

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to update section: {str(e)}")
            raise

    def delete(self, user_id: str, section_id: str) -> None:
        """
        Delete an owned section. Refused while any document belongs to it.
        """
        section = ensure_section_owner(self.db, user_id, section_id, action="delete this section")

        has_documents = (
            self.db.query(Document.id)
            .filter(Document.section_id == section.id)
            .first()
            is not None
        )
        if has_documents:
            raise BadRequestError("Cannot delete section with documents")

        try:
            self.db.delete(section)
            self.db.commit()
            logger.info(f"Section deleted: {section_id}")

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to delete section: {str(e)}")
            raise

    def reorder(self, user_id: str, case_id: str, ordered_section_ids: List[str]) -> None:
        """
        Rewrite every section's order to its index in `ordered_section_ids`.

        The list must be a permutation of the case's section ids. All rows are
        written in a single commit, so either every order changes or none do.
        """
        ensure_case_owner(self.db, user_id, case_id, action="reorder sections in this case")

        sections = self.db.query(Section).filter(Section.case_id == case_id).all()
        by_id = {section.id: section for section in sections}

        if len(set(ordered_section_ids)) != len(ordered_section_ids):
            raise BadRequestError("Section ids must not repeat")
        unknown = [sid for sid in ordered_section_ids if sid not in by_id]
        if unknown:
            raise BadRequestError(f"Sections do not belong to this case: {', '.join(unknown)}")
        if len(ordered_section_ids) != len(by_id):
            raise BadRequestError("Reorder must list every section of the case")

        try:
            for index, section_id in enumerate(ordered_section_ids):
                by_id[section_id].order = index
            self.db.commit()
            logger.info(f"Sections reordered for case {case_id}: {len(ordered_section_ids)} rows")

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to reorder sections: {str(e)}")
            raise
