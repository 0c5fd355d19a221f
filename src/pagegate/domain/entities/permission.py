"""Permission cells, matrices and persisted overrides."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

from pagegate.domain.value_objects import Action


@dataclass(frozen=True)
class PermissionCell:
    """Allowed actions for one page. Every action defaults to False."""

    view: bool = False
    create: bool = False
    edit: bool = False
    delete: bool = False
    export: bool = False
    print: bool = False
    approve: bool = False
    bulk_operations: bool = False
    advanced_features: bool = False

    @classmethod
    def granting(cls, actions: Iterable[Action]) -> "PermissionCell":
        """Cell with exactly the given actions set."""
        return cls(**{action.value: True for action in actions})

    @classmethod
    def full(cls) -> "PermissionCell":
        return cls.granting(Action)

    def allows(self, action: Action) -> bool:
        return getattr(self, Action(action).value)

    def with_action(self, action: Action, value: bool) -> "PermissionCell":
        return replace(self, **{Action(action).value: bool(value)})

    @property
    def granted(self) -> frozenset[Action]:
        return frozenset(action for action in Action if self.allows(action))

    def as_dict(self) -> dict[str, bool]:
        return {action.value: self.allows(action) for action in Action}

    def __getitem__(self, action: Action | str) -> bool:
        return self.allows(Action(action))


@dataclass
class PermissionOverride:
    """Sparse per-page deviations from the role template, as persisted."""

    cells: dict[str, PermissionCell] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.cells

    @classmethod
    def from_matrix(cls, matrix: "PermissionMatrix") -> "PermissionOverride":
        """Whole-matrix override; saving always stores the complete draft."""
        return cls(cells=dict(matrix.cells))


@dataclass
class PermissionMatrix:
    """Page key -> cell grid for one user.

    Reading a page with no cell yields an all-false cell, never an error.
    """

    cells: dict[str, PermissionCell] = field(default_factory=dict)

    @classmethod
    def denied(cls, page_keys: Iterable[str]) -> "PermissionMatrix":
        """All-false matrix covering the given pages."""
        return cls(cells={key: PermissionCell() for key in page_keys})

    def cell(self, page_key: str) -> PermissionCell:
        return self.cells.get(page_key, PermissionCell())

    def allows(self, page_key: str, action: Action) -> bool:
        return self.cell(page_key).allows(action)

    def set_cell(self, page_key: str, cell: PermissionCell) -> None:
        self.cells[page_key] = cell

    def copy(self) -> "PermissionMatrix":
        return PermissionMatrix(cells=dict(self.cells))

    def merged(self, override: PermissionOverride) -> "PermissionMatrix":
        """Replace whole cells from the override.

        Only pages already present are replaced, so override keys that are
        not part of this matrix are ignored.
        """
        result = self.copy()
        for page_key, cell in override.cells.items():
            if page_key in result.cells:
                result.cells[page_key] = cell
        return result

    def changed_pages(self, other: "PermissionMatrix") -> list[str]:
        """Page keys whose cells differ between the two matrices."""
        keys = list(self.cells) + [k for k in other.cells if k not in self.cells]
        return [k for k in keys if self.cell(k) != other.cell(k)]

    def view_summary(self) -> tuple[int, int]:
        """(pages with view granted, total pages)."""
        viewable = sum(1 for cell in self.cells.values() if cell.view)
        return viewable, len(self.cells)

    def keys(self) -> list[str]:
        return list(self.cells)

    def __getitem__(self, page_key: str) -> PermissionCell:
        return self.cell(page_key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)
