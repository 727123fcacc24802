# app/services/document_service.py

from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from app.core.logger import logger
from app.db.models import Document, Section
from app.services.ownership import ensure_case_owner, ensure_document_owner
from app.services.summarization_service import SummarizationService
from app.utils.exceptions import BadRequestError, InternalServiceError
from app.utils.updates import UNCHANGED, Clear, FieldUpdate, Set, apply_update


class DocumentService:
    """
    Service layer for document metadata and summaries.
    """

    def __init__(self, db: Session, summarizer: SummarizationService):
        self.db = db
        self.summarizer = summarizer

    def _ensure_section_in_case(self, section_id: str, case_id: str) -> None:
        section = self.db.query(Section.case_id).filter(Section.id == section_id).first()
        if section is None or section.case_id != case_id:
            raise BadRequestError(f"Section {section_id} does not belong to this case")

    def list_by_case_id(self, user_id: str, case_id: str) -> List[Document]:
        """
        Documents of an owned case, newest upload first, section attached.
        """
        ensure_case_owner(self.db, user_id, case_id)
        return (
            self.db.query(Document)
            .options(selectinload(Document.section))
            .filter(Document.case_id == case_id)
            .order_by(Document.uploaded_at.desc())
            .all()
        )

    def get_by_id(self, user_id: str, document_id: str) -> Document:
        return ensure_document_owner(self.db, user_id, document_id)

    def create(
        self,
        user_id: str,
        case_id: str,
        name: str,
        file_url: str,
        file_type: str,
        file_size: int,
        section_id: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Document:
        """
        Record an already-uploaded file. When extracted text is supplied a
        summary is generated; if that fails the document is stored without one.
        """
        ensure_case_owner(self.db, user_id, case_id, action="upload to this case")
        if section_id:
            self._ensure_section_in_case(section_id, case_id)

        summary = None
        if content:
            try:
                summary = self.summarizer.summarize(content) or None
            except Exception as e:
                logger.error(f"Error generating document summary: {str(e)}")

        try:
            document = Document(
                case_id=case_id,
                section_id=section_id or None,
                name=name,
                file_url=file_url,
                file_type=file_type,
                file_size=file_size,
                summary=summary,
            )
            self.db.add(document)
            self.db.commit()
            self.db.refresh(document)

            logger.info(f"Document created: {document.id} in case {case_id}")
            return document

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create document: {str(e)}")
            raise

    def update(
        self,
        user_id: str,
        document_id: str,
        name: FieldUpdate = UNCHANGED,
        section_id: FieldUpdate = UNCHANGED,
        summary: FieldUpdate = UNCHANGED,
    ) -> Document:
        """
        Rename, move between sections, or set/clear the summary.

        `section_id`: Unchanged keeps the current section, Clear detaches the
        document, Set(id) attaches it to that section of the same case.
        """
        if isinstance(name, Clear):
            raise BadRequestError("Document name cannot be cleared")

        document = ensure_document_owner(self.db, user_id, document_id, action="update this document")
        if isinstance(section_id, Set):
            self._ensure_section_in_case(section_id.value, document.case_id)

        try:
            apply_update(document, "name", name)
            apply_update(document, "section_id", section_id)
            apply_update(document, "summary", summary)
            self.db.commit()
            self.db.refresh(document)

            logger.info(f"Document updated: {document.id}")
            return document

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to update document: {str(e)}")
            raise

    def delete(self, user_id: str, document_id: str) -> None:
        """
        Delete the metadata record. The stored file is left to the storage provider.
        """
        document = ensure_document_owner(self.db, user_id, document_id, action="delete this document")
        try:
            self.db.delete(document)
            self.db.commit()
            logger.info(f"Document deleted: {document_id}")

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to delete document: {str(e)}")
            raise

    def generate_summary(
        self,
        user_id: str,
        content: str,
        document_id: Optional[str] = None,
    ) -> str:
        """
        Summarize `content` on request. Unlike create(), a summarizer failure
        is reported to the caller and nothing is written.
        """
        document = None
        if document_id:
            document = ensure_document_owner(self.db, user_id, document_id, action="summarize this document")

        try:
            summary = self.summarizer.summarize(content)
        except Exception as e:
            logger.error(f"Error generating document summary: {str(e)}")
            raise InternalServiceError("Failed to generate summary")

        if document is not None:
            try:
                document.summary = summary or None
                self.db.commit()
                logger.info(f"Summary stored for document {document.id}")
            except Exception as e:
                self.db.rollback()
                logger.error(f"Failed to store summary: {str(e)}")
                raise

        return summary
