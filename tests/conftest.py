"""Pytest fixtures for pagegate tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest

from pagegate.application.use_cases.permission.access_guard import AccessGuard
from pagegate.application.use_cases.permission.edit_permissions import PermissionEditor
from pagegate.application.use_cases.permission.resolve_permissions import PermissionResolver
from pagegate.domain.catalog import PageCatalog
from pagegate.domain.entities import Principal, UserProfile
from pagegate.domain.exceptions import StoreUnavailable
from pagegate.domain.templates import RoleTemplateEngine
from pagegate.infrastructure.permission.profile_permission_store import ProfilePermissionStore


# --- Fake repositories ---


class FakeProfileRepository:
    """In-memory user profile repository."""

    def __init__(self) -> None:
        self._by_id: dict[int, UserProfile] = {}
        self.unavailable = False
        self.writes: list[tuple[int, str]] = []

    def _check_available(self) -> None:
        if self.unavailable:
            raise StoreUnavailable("profile store offline")

    async def get_by_id(self, profile_id: int) -> UserProfile | None:
        self._check_available()
        return self._by_id.get(profile_id)

    async def list(self, *, active_only: bool = False) -> list[UserProfile]:
        self._check_available()
        items = sorted(self._by_id.values(), key=lambda p: p.id, reverse=True)
        if active_only:
            items = [p for p in items if p.is_active]
        return items

    async def update_permissions(self, profile_id: int, document: str) -> bool:
        self._check_available()
        profile = self._by_id.get(profile_id)
        if profile is None:
            return False
        profile.detailed_permissions = document
        self.writes.append((profile_id, document))
        return True

    def add_profile(self, profile: UserProfile) -> UserProfile:
        """Helper to add profile for tests."""
        self._by_id[profile.id] = profile
        return profile


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.profiles = FakeProfileRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_profile(
    profile_id: int,
    role: str = "Employee",
    station: str = "MOBIL",
    detailed_permissions: str | None = None,
    is_active: bool = True,
    employee_id: str | None = None,
) -> UserProfile:
    return UserProfile(
        id=profile_id,
        role=role,
        station=station,
        employee_id=employee_id or f"EMP{profile_id:03d}",
        phone="555-0100",
        is_active=is_active,
        detailed_permissions=detailed_permissions,
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory yielding the same FakeUnitOfWork for every call in a test."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def catalog() -> PageCatalog:
    return PageCatalog.default()


@pytest.fixture
def templates(catalog) -> RoleTemplateEngine:
    return RoleTemplateEngine(catalog)


@pytest.fixture
def permission_store(uow_factory) -> ProfilePermissionStore:
    return ProfilePermissionStore(uow_factory)


@pytest.fixture
def resolver(permission_store, templates) -> PermissionResolver:
    return PermissionResolver(permission_store, templates)


@pytest.fixture
def editor(resolver, permission_store) -> PermissionEditor:
    return PermissionEditor(resolver, permission_store)


@pytest.fixture
def access_guard(resolver) -> AccessGuard:
    return AccessGuard(resolver)


@pytest.fixture
def admin(fake_uow) -> Principal:
    """Administrator with a stored profile and no override."""
    return fake_uow.profiles.add_profile(
        make_profile(1, role="Administrator", station="ALL_STATIONS")
    ).to_principal()


@pytest.fixture
def employee(fake_uow) -> Principal:
    """Employee at MOBIL with a stored profile and no override."""
    return fake_uow.profiles.add_profile(make_profile(2, role="Employee")).to_principal()


@pytest.fixture
def manager(fake_uow) -> Principal:
    """Management user at AMOCO BROOKLYN with no override."""
    return fake_uow.profiles.add_profile(
        make_profile(3, role="Management", station="AMOCO BROOKLYN")
    ).to_principal()
