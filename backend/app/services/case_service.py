# app/services/case_service.py

from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from app.core.logger import logger
from app.db.models import Case, Section, DEFAULT_SECTIONS
from app.services.ownership import ensure_case_owner
from app.utils.validators import validate_length


class CaseService:
    """
    Service layer for case management.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: str) -> List[Case]:
        """
        All cases owned by the user, most recently updated first.
        """
        return (
            self.db.query(Case)
            .filter(Case.user_id == user_id)
            .order_by(Case.updated_at.desc())
            .all()
        )

    def get_by_id(self, user_id: str, case_id: str) -> Case:
        """
        Case with its sections (display order) and documents (newest first).
        """
        return ensure_case_owner(
            self.db,
            user_id,
            case_id,
            options=[selectinload(Case.sections), selectinload(Case.documents)],
        )

    def create(self, user_id: str, title: str, description: Optional[str] = None) -> Case:
        """
        Create a case together with its default sections in one transaction.
        """
        validate_length(title, "Title")
        try:
            case = Case(user_id=user_id, title=title, description=description)
            case.sections = [
                Section(name=name, type=section_type, order=order)
                for name, section_type, order in DEFAULT_SECTIONS
            ]
            self.db.add(case)
            self.db.commit()
            self.db.refresh(case)

            logger.info(f"Case created: {case.id} with {len(case.sections)} sections")
            return case

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create case: {str(e)}")
            raise

    def update(
        self,
        user_id: str,
        case_id: str,
        title: str,
        description: Optional[str] = None,
    ) -> Case:
        """
        Replace title and description of an owned case.
        """
        validate_length(title, "Title")
        case = ensure_case_owner(self.db, user_id, case_id, action="update this case")
        try:
            case.title = title
            case.description = description
            self.db.commit()
            self.db.refresh(case)

            logger.info(f"Case updated: {case.id}")
            return case

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to update case: {str(e)}")
            raise

    def delete(self, user_id: str, case_id: str) -> None:
        """
        Delete an owned case; its sections and documents go with it.
        """
        case = ensure_case_owner(self.db, user_id, case_id, action="delete this case")
        try:
            self.db.delete(case)
            self.db.commit()
            logger.info(f"Case deleted: {case_id}")

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to delete case: {str(e)}")
            raise
