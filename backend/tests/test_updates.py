"""
Tests for the partial update instructions derived from PATCH bodies.
"""
from types import SimpleNamespace

from app.db.schemas import DocumentUpdate, SectionUpdate
from app.utils.updates import CLEAR, UNCHANGED, Set, apply_update, instructions_from


class TestInstructionsFrom:

    def test_omitted_null_and_value(self):
        payload = DocumentUpdate.model_validate({"section_id": None, "name": "brief.pdf"})

        instructions = instructions_from(payload)

        assert instructions["name"] == Set("brief.pdf")
        assert instructions["section_id"] == CLEAR
        assert instructions["summary"] == UNCHANGED

    def test_empty_body_changes_nothing(self):
        instructions = instructions_from(SectionUpdate.model_validate({}))
        assert set(instructions.values()) == {UNCHANGED}
        assert set(instructions) == {"name", "content", "order"}

    def test_zero_is_a_value_not_a_clear(self):
        instructions = instructions_from(SectionUpdate.model_validate({"order": 0}))
        assert instructions["order"] == Set(0)


class TestApplyUpdate:

    def test_set_clear_and_unchanged(self):
        target = SimpleNamespace(summary="old")

        assert apply_update(target, "summary", UNCHANGED) is False
        assert target.summary == "old"

        assert apply_update(target, "summary", Set("new")) is True
        assert target.summary == "new"

        assert apply_update(target, "summary", CLEAR) is True
        assert target.summary is None
