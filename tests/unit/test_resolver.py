"""Unit tests for PermissionResolver."""

import json

import pytest

from pagegate.application.use_cases.permission.resolve_permissions import (
    PermissionResolver,
    ResolutionSource,
)
from pagegate.domain.entities import PermissionCell, Principal
from pagegate.domain.value_objects import Action

from tests.conftest import FakeUnitOfWork, make_profile


def _all_false(matrix) -> bool:
    return all(cell == PermissionCell() for cell in matrix.cells.values())


@pytest.mark.asyncio
async def test_unknown_user_fails_closed(resolver: PermissionResolver) -> None:
    """No profile resolves to all-false, not to the role template."""
    ghost = Principal(id=404, role="Administrator", station="ALL_STATIONS")
    resolution = await resolver.resolve(ghost)

    assert resolution.source is ResolutionSource.FAIL_CLOSED
    assert _all_false(resolution.matrix)
    assert len(resolution.matrix) == len(resolver.templates.catalog)


@pytest.mark.asyncio
async def test_inactive_user_fails_closed(
    resolver: PermissionResolver, fake_uow: FakeUnitOfWork
) -> None:
    profile = fake_uow.profiles.add_profile(make_profile(9, role="Administrator", is_active=False))
    matrix = await resolver.effective(profile.to_principal())
    assert _all_false(matrix)


@pytest.mark.asyncio
async def test_resolve_stored_ignores_inactive_flag(
    resolver: PermissionResolver, fake_uow: FakeUnitOfWork
) -> None:
    """The editor view of an inactive user is what is stored, not the fail-closed matrix."""
    profile = fake_uow.profiles.add_profile(
        make_profile(
            9, is_active=False, detailed_permissions=json.dumps({"salary": {"view": True}})
        )
    )

    resolution = await resolver.resolve_stored(profile.to_principal())

    assert resolution.source is ResolutionSource.OVERRIDE
    assert resolution.matrix["salary"].view is True
    assert resolution.matrix["dashboard"].create is True


@pytest.mark.asyncio
async def test_no_override_uses_template(resolver: PermissionResolver, admin: Principal) -> None:
    resolution = await resolver.resolve(admin)
    assert resolution.source is ResolutionSource.TEMPLATE
    assert resolution.matrix["user_management"][Action.DELETE] is True


@pytest.mark.asyncio
async def test_employee_template_scenario(resolver: PermissionResolver, employee: Principal) -> None:
    matrix = await resolver.effective(employee)
    assert matrix["user_management"]["view"] is False


@pytest.mark.asyncio
async def test_override_replaces_page_wholesale(
    resolver: PermissionResolver, fake_uow: FakeUnitOfWork
) -> None:
    """Template view=true, override all-false: the override wins for the whole page."""
    profile = fake_uow.profiles.add_profile(
        make_profile(
            10,
            role="Employee",
            detailed_permissions=json.dumps({"dashboard": PermissionCell().as_dict()}),
        )
    )
    resolution = await resolver.resolve(profile.to_principal())

    assert resolution.source is ResolutionSource.OVERRIDE
    assert resolution.matrix["dashboard"] == PermissionCell()
    # pages absent from the override keep the template
    assert resolution.matrix["sales_reports"].view is True


@pytest.mark.asyncio
async def test_override_grant_on_single_cell_keeps_siblings_as_stored(
    resolver: PermissionResolver, fake_uow: FakeUnitOfWork
) -> None:
    """Granting view on user_management leaves the sibling actions as the override says."""
    profile = fake_uow.profiles.add_profile(
        make_profile(
            11,
            role="Employee",
            detailed_permissions=json.dumps({"user_management": {"view": True, "export": True}}),
        )
    )
    matrix = await resolver.effective(profile.to_principal())

    assert matrix["user_management"].granted == {Action.VIEW, Action.EXPORT}


@pytest.mark.asyncio
async def test_override_unknown_page_ignored(
    resolver: PermissionResolver, fake_uow: FakeUnitOfWork
) -> None:
    profile = fake_uow.profiles.add_profile(
        make_profile(12, detailed_permissions=json.dumps({"legacy_page": {"view": True}}))
    )
    matrix = await resolver.effective(profile.to_principal())
    assert "legacy_page" not in matrix.cells
    assert sorted(matrix.keys()) == sorted(resolver.templates.catalog.keys())


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["{corrupt", "[]", '{"dashboard": 7}'])
async def test_malformed_override_falls_back_to_template(
    resolver: PermissionResolver, fake_uow: FakeUnitOfWork, raw: str
) -> None:
    profile = fake_uow.profiles.add_profile(
        make_profile(13, role="Management", detailed_permissions=raw)
    )
    resolution = await resolver.resolve(profile.to_principal())

    assert resolution.source is ResolutionSource.TEMPLATE
    assert resolution.matrix == resolver.templates.default_matrix("Management")


@pytest.mark.asyncio
async def test_empty_override_uses_template(
    resolver: PermissionResolver, fake_uow: FakeUnitOfWork
) -> None:
    profile = fake_uow.profiles.add_profile(make_profile(14, detailed_permissions="{}"))
    resolution = await resolver.resolve(profile.to_principal())
    assert resolution.source is ResolutionSource.TEMPLATE


@pytest.mark.asyncio
async def test_store_unavailable_falls_back_to_template_with_warning(
    resolver: PermissionResolver, fake_uow: FakeUnitOfWork, manager: Principal
) -> None:
    """Read failure is fail-open to the role template only, with a warning."""
    fake_uow.profiles.unavailable = True
    resolution = await resolver.resolve(manager)

    assert resolution.source is ResolutionSource.TEMPLATE
    assert resolution.warnings
    assert resolution.store_unavailable is True
    assert resolution.matrix == resolver.templates.default_matrix("Management")
    assert resolution.matrix["security_settings"].delete is False
