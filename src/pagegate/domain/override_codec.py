"""Serialization of PermissionOverride documents.

The stored document is a JSON object mapping page key to an object of the
nine boolean action fields. Unknown fields are ignored and missing fields
default to false.
"""

import json

from pydantic import BaseModel, ConfigDict, TypeAdapter, create_model
from pydantic import ValidationError as PydanticValidationError

from pagegate.domain.entities import PermissionCell, PermissionOverride
from pagegate.domain.exceptions import MalformedOverride
from pagegate.domain.value_objects import Action

CellDocument: type[BaseModel] = create_model(
    "CellDocument",
    __config__=ConfigDict(extra="ignore"),
    **{action.value: (bool, False) for action in Action},
)

_document_adapter = TypeAdapter(dict[str, CellDocument])


def serialize_override(override: PermissionOverride) -> str:
    """Encode override as the stored JSON document."""
    return json.dumps({key: cell.as_dict() for key, cell in override.cells.items()})


def parse_override(raw: str | None) -> PermissionOverride:
    """Decode a stored document. Blank, null and absent documents are empty overrides.

    Raises MalformedOverride when the text is not JSON or not the expected shape.
    """
    if raw is None or not raw.strip():
        return PermissionOverride()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedOverride(f"Override is not valid JSON: {e}") from e
    if data is None:
        return PermissionOverride()
    try:
        documents = _document_adapter.validate_python(data)
    except PydanticValidationError as e:
        raise MalformedOverride(f"Override has unexpected shape: {e.error_count()} errors") from e
    return PermissionOverride(
        cells={key: PermissionCell(**doc.model_dump()) for key, doc in documents.items()}
    )
