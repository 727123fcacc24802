"""
Unit tests for DocumentService.

The summarizer is the FakeSummarizer from conftest, so no Bedrock calls are made.
"""
import pytest

from app.db.models import Document
from app.services.case_service import CaseService
from app.services.document_service import DocumentService
from app.utils.exceptions import (
    BadRequestError,
    InternalServiceError,
    NotFoundError,
    UnauthorizedError,
)
from app.utils.updates import CLEAR, Set


@pytest.fixture
def service(db_session, summarizer):
    return DocumentService(db_session, summarizer)


@pytest.fixture
def case(db_session, alice):
    return CaseService(db_session).create(alice.id, "Smith v. Jones")


def _create(service, user_id, case_id, **kwargs):
    params = dict(
        name="complaint.pdf",
        file_url="https://files.example.com/complaint.pdf",
        file_type="application/pdf",
        file_size=2048,
    )
    params.update(kwargs)
    return service.create(user_id, case_id, **params)


class TestCreateDocument:

    def test_summary_generated_from_content(self, service, summarizer, alice, case):
        document = _create(service, alice.id, case.id, content="The plaintiff alleges...")

        assert document.summary == "A concise summary."
        assert summarizer.calls == ["The plaintiff alleges..."]

    def test_no_content_means_no_summary_call(self, service, summarizer, alice, case):
        document = _create(service, alice.id, case.id)

        assert document.summary is None
        assert summarizer.calls == []

    def test_summarizer_failure_still_stores_document(self, service, summarizer, alice, case, db_session):
        summarizer.fail_with()

        document = _create(service, alice.id, case.id, content="text")

        assert document.summary is None
        assert db_session.query(Document).count() == 1

    def test_unexpected_summarizer_error_still_stores_document(self, service, summarizer, alice, case, db_session):
        summarizer.error = RuntimeError("connection reset")

        document = _create(service, alice.id, case.id, content="text")

        assert document.summary is None
        assert db_session.query(Document).count() == 1

    def test_empty_summary_is_stored_as_none(self, service, summarizer, alice, case):
        summarizer.result = ""
        document = _create(service, alice.id, case.id, content="text")
        assert document.summary is None

    def test_attached_to_section_of_same_case(self, service, alice, case):
        section = case.sections[1]
        document = _create(service, alice.id, case.id, section_id=section.id)
        assert document.section_id == section.id

    def test_section_from_another_case_is_rejected(self, service, alice, case, db_session):
        other = CaseService(db_session).create(alice.id, "Other")
        with pytest.raises(BadRequestError):
            _create(service, alice.id, case.id, section_id=other.sections[0].id)
        assert db_session.query(Document).count() == 0

    def test_other_user_cannot_upload(self, service, summarizer, bob, case):
        with pytest.raises(UnauthorizedError):
            _create(service, bob.id, case.id, content="text")
        assert summarizer.calls == []

    def test_missing_case(self, service, alice):
        with pytest.raises(NotFoundError):
            _create(service, alice.id, "no-such-case")


class TestReadDocuments:

    def test_list_by_case(self, service, alice, case):
        _create(service, alice.id, case.id, name="one.pdf")
        _create(service, alice.id, case.id, name="two.pdf", section_id=case.sections[0].id)

        documents = service.list_by_case_id(alice.id, case.id)
        assert {d.name for d in documents} == {"one.pdf", "two.pdf"}
        attached = next(d for d in documents if d.name == "two.pdf")
        assert attached.section.name == "Case Assessment"

    def test_list_requires_ownership(self, service, bob, case):
        with pytest.raises(UnauthorizedError):
            service.list_by_case_id(bob.id, case.id)

    def test_get_by_id(self, service, alice, bob, case):
        document = _create(service, alice.id, case.id)
        assert service.get_by_id(alice.id, document.id).id == document.id
        with pytest.raises(UnauthorizedError):
            service.get_by_id(bob.id, document.id)
        with pytest.raises(NotFoundError):
            service.get_by_id(alice.id, "missing")


class TestUpdateDocument:

    def test_omitted_section_is_kept(self, service, alice, case):
        section_id = case.sections[0].id
        document = _create(service, alice.id, case.id, section_id=section_id)

        updated = service.update(alice.id, document.id, name=Set("renamed.pdf"))
        assert updated.name == "renamed.pdf"
        assert updated.section_id == section_id

    def test_clear_detaches_section(self, service, alice, case):
        document = _create(service, alice.id, case.id, section_id=case.sections[0].id)

        updated = service.update(alice.id, document.id, section_id=CLEAR)
        assert updated.section_id is None
        assert updated.name == "complaint.pdf"

    def test_set_moves_to_another_section(self, service, alice, case):
        document = _create(service, alice.id, case.id, section_id=case.sections[0].id)
        target = case.sections[2].id

        updated = service.update(alice.id, document.id, section_id=Set(target))
        assert updated.section_id == target

    def test_cannot_move_to_section_of_another_case(self, service, alice, case, db_session):
        other = CaseService(db_session).create(alice.id, "Other")
        document = _create(service, alice.id, case.id)

        with pytest.raises(BadRequestError):
            service.update(alice.id, document.id, section_id=Set(other.sections[0].id))

    def test_summary_can_be_set_and_cleared(self, service, alice, case):
        document = _create(service, alice.id, case.id)

        assert service.update(alice.id, document.id, summary=Set("Edited")).summary == "Edited"
        assert service.update(alice.id, document.id, summary=CLEAR).summary is None

    def test_name_cannot_be_cleared(self, service, alice, case):
        document = _create(service, alice.id, case.id)
        with pytest.raises(BadRequestError):
            service.update(alice.id, document.id, name=CLEAR)

    def test_other_user_cannot_update(self, service, bob, alice, case):
        document = _create(service, alice.id, case.id)
        with pytest.raises(UnauthorizedError):
            service.update(bob.id, document.id, name=Set("mine.pdf"))


class TestDeleteDocument:

    def test_delete(self, service, alice, case, db_session):
        document = _create(service, alice.id, case.id)
        service.delete(alice.id, document.id)
        assert db_session.query(Document).count() == 0

    def test_other_user_cannot_delete(self, service, alice, bob, case, db_session):
        document = _create(service, alice.id, case.id)
        with pytest.raises(UnauthorizedError):
            service.delete(bob.id, document.id)
        assert db_session.query(Document).count() == 1


class TestGenerateSummary:

    def test_returns_summary_without_document(self, service, summarizer, alice):
        assert service.generate_summary(alice.id, "Some text") == "A concise summary."
        assert summarizer.calls == ["Some text"]

    def test_persists_summary_on_document(self, service, summarizer, alice, case, db_session):
        document = _create(service, alice.id, case.id)
        summarizer.result = "Fresh summary."

        service.generate_summary(alice.id, "Some text", document_id=document.id)

        db_session.expire_all()
        assert db_session.get(Document, document.id).summary == "Fresh summary."

    def test_failure_raises_and_leaves_summary_untouched(self, service, summarizer, alice, case, db_session):
        document = _create(service, alice.id, case.id, content="original text")
        assert document.summary == "A concise summary."
        summarizer.fail_with()

        with pytest.raises(InternalServiceError) as exc_info:
            service.generate_summary(alice.id, "new text", document_id=document.id)

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "Failed to generate summary"
        db_session.expire_all()
        assert db_session.get(Document, document.id).summary == "A concise summary."

    def test_unexpected_error_becomes_internal_error(self, service, summarizer, alice, case, db_session):
        document = _create(service, alice.id, case.id)
        summarizer.error = RuntimeError("connection reset")

        with pytest.raises(InternalServiceError) as exc_info:
            service.generate_summary(alice.id, "text", document_id=document.id)

        assert exc_info.value.detail == "Failed to generate summary"
        db_session.expire_all()
        assert db_session.get(Document, document.id).summary is None

    def test_empty_output_is_returned_but_stored_as_none(self, service, summarizer, alice, case, db_session):
        document = _create(service, alice.id, case.id, content="text")
        summarizer.result = ""

        assert service.generate_summary(alice.id, "text", document_id=document.id) == ""

        db_session.expire_all()
        assert db_session.get(Document, document.id).summary is None

    def test_ownership_checked_before_summarizing(self, service, summarizer, alice, bob, case):
        document = _create(service, alice.id, case.id)

        with pytest.raises(UnauthorizedError):
            service.generate_summary(bob.id, "text", document_id=document.id)
        with pytest.raises(NotFoundError):
            service.generate_summary(alice.id, "text", document_id="missing")
        assert summarizer.calls == []
