"""Unit tests for override document (de)serialization."""

import json

import pytest

from pagegate.domain.entities import PermissionCell, PermissionOverride
from pagegate.domain.exceptions import MalformedOverride
from pagegate.domain.override_codec import parse_override, serialize_override
from pagegate.domain.templates import RoleTemplateEngine
from pagegate.domain.value_objects import Action, BulkMode


def test_round_trip_editor_override(templates: RoleTemplateEngine) -> None:
    """Overrides built from edited matrices survive serialize -> parse."""
    matrix = templates.default_matrix("Employee")
    matrix.set_cell("salary", PermissionCell.granting(BulkMode.OPERATIONAL.actions))
    matrix.set_cell("system_logs", PermissionCell.granting([Action.APPROVE]))
    override = PermissionOverride.from_matrix(matrix)

    assert parse_override(serialize_override(override)) == override


def test_round_trip_empty_override() -> None:
    assert parse_override(serialize_override(PermissionOverride())) == PermissionOverride()


def test_serialized_cell_has_all_nine_fields() -> None:
    doc = json.loads(serialize_override(PermissionOverride(cells={"dashboard": PermissionCell()})))
    assert set(doc["dashboard"]) == {a.value for a in Action}


def test_missing_fields_default_false_and_extra_ignored() -> None:
    raw = json.dumps({"dashboard": {"view": True, "manage": True}, "orders": {}})
    override = parse_override(raw)
    assert override.cells["dashboard"] == PermissionCell(view=True)
    assert override.cells["orders"] == PermissionCell()


@pytest.mark.parametrize("raw", [None, "", "   ", "null", "{}"])
def test_absent_documents_parse_empty(raw) -> None:
    assert parse_override(raw).is_empty


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        "[1, 2]",
        '"dashboard"',
        '{"dashboard": "all"}',
        '{"dashboard": {"view": [true]}}',
    ],
)
def test_malformed_documents_raise(raw: str) -> None:
    with pytest.raises(MalformedOverride):
        parse_override(raw)
