"""Tests for static definition checks."""

import pytest

from namecraft.core.validation import check_definition
from namecraft.models import Item


def items_from(*records: dict) -> list[Item]:
    return [Item.model_validate(r) for r in records]


@pytest.mark.unit
class TestCheckDefinition:
    """Tests for check_definition."""

    def test_clean_definition(self, sample_items: list[Item]) -> None:
        report = check_definition(sample_items)
        assert report.ok
        assert report.issues == []
        assert report.item_count == 2

    def test_duplicate_id_is_warning(self) -> None:
        report = check_definition(
            items_from({"id": "a", "prompt": "A"}, {"id": "a", "prompt": "Again"})
        )
        assert report.ok
        assert len(report.warnings) == 1
        assert report.warnings[0].position == 1
        assert "Duplicate id" in report.warnings[0].hint

    def test_unknown_constraint_id_is_error(self) -> None:
        report = check_definition(
            items_from(
                {"id": "a", "prompt": "A", "constraints": [{"id": "ghost", "answers": ["x"]}]}
            )
        )
        assert not report.ok
        assert report.errors[0].item_id == "a"
        assert "unknown id 'ghost'" in report.errors[0].hint

    def test_forward_reference_is_error(self) -> None:
        report = check_definition(
            items_from(
                {"id": "a", "prompt": "A", "constraints": [{"id": "b", "answers": ["x"]}]},
                {"id": "b", "prompt": "B"},
            )
        )
        assert not report.ok
        assert "not asked before it" in report.errors[0].hint

    def test_self_reference_is_error(self) -> None:
        report = check_definition(
            items_from(
                {"id": "a", "prompt": "A", "constraints": [{"id": "a", "answers": ["x"]}]}
            )
        )
        assert len(report.errors) == 1

    def test_constraint_without_answers_is_warning(self) -> None:
        report = check_definition(
            items_from(
                {"id": "a", "prompt": "A"},
                {"id": "b", "prompt": "B", "constraints": [{"id": "a", "answers": []}]},
            )
        )
        assert report.ok
        assert "allows no answers" in report.warnings[0].hint

    def test_empty_definition(self) -> None:
        report = check_definition([])
        assert report.ok
        assert report.item_count == 0
