"""JSON shapes shared by the API resources."""

from pagegate.domain.catalog import PageCatalog
from pagegate.domain.entities import PermissionMatrix
from pagegate.domain.value_objects import Decision


def matrix_media(matrix: PermissionMatrix, catalog: PageCatalog) -> dict[str, dict[str, bool]]:
    """Matrix in catalog display order."""
    return {key: matrix.cell(key).as_dict() for key in catalog.keys()}


def decision_media(decision: Decision) -> dict:
    media: dict = {"outcome": decision.outcome.value, "allowed": decision.allowed}
    if decision.denial:
        media["denial"] = {
            "kind": decision.denial.kind.value,
            "reason": decision.denial.reason,
            "suggestion": decision.denial.suggestion,
        }
    return media
