"""Resolve effective permissions - role template merged with the stored override."""

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from pagegate.application.ports import PermissionStore
from pagegate.domain.entities import PermissionMatrix, Principal
from pagegate.domain.exceptions import MalformedOverride, StoreUnavailable, UnknownPrincipal
from pagegate.domain.override_codec import parse_override
from pagegate.domain.templates import RoleTemplateEngine

logger = logging.getLogger(__name__)


class ResolutionSource(StrEnum):
    """Where the effective matrix came from."""

    TEMPLATE = "template"
    OVERRIDE = "override"
    FAIL_CLOSED = "fail_closed"


@dataclass
class Resolution:
    """Effective matrix plus non-blocking warnings for the caller to surface."""

    matrix: PermissionMatrix
    source: ResolutionSource
    warnings: list[str] = field(default_factory=list)
    store_unavailable: bool = False

    @property
    def has_override(self) -> bool:
        return self.source is ResolutionSource.OVERRIDE


class PermissionResolver:
    """Computes a principal's effective permissions. Never raises on store or parse errors."""

    def __init__(self, permission_store: PermissionStore, templates: RoleTemplateEngine) -> None:
        self._store = permission_store
        self._templates = templates

    @property
    def templates(self) -> RoleTemplateEngine:
        return self._templates

    async def resolve(self, principal: Principal) -> Resolution:
        """Template for the role, with override cells replacing whole pages.

        Unknown and inactive principals resolve to an all-false matrix. An
        unreachable store falls back to the template, not to full access.
        """
        if not principal.active:
            logger.info("Principal %s is inactive; denying all pages", principal.id)
            return self._fail_closed()
        return await self.resolve_stored(principal)

    async def resolve_stored(self, principal: Principal) -> Resolution:
        """Template plus stored override, whether or not the principal is active.

        Used by the editor, which must show and keep what is stored for
        deactivated users. Unknown principals still resolve to all-false.
        """
        try:
            raw = await self._store.read_override(principal.id)
        except UnknownPrincipal:
            logger.warning("No profile for principal %s; denying all pages", principal.id)
            return self._fail_closed()
        except StoreUnavailable as e:
            logger.warning("Permission store unavailable for %s: %s", principal.id, e)
            return Resolution(
                matrix=self._templates.default_matrix(principal.role),
                source=ResolutionSource.TEMPLATE,
                warnings=[
                    "Stored permissions could not be loaded; showing role defaults."
                ],
                store_unavailable=True,
            )

        template = self._templates.default_matrix(principal.role)
        try:
            override = parse_override(raw)
        except MalformedOverride as e:
            logger.warning("Ignoring malformed override for %s: %s", principal.id, e)
            return Resolution(matrix=template, source=ResolutionSource.TEMPLATE)

        if override.is_empty:
            return Resolution(matrix=template, source=ResolutionSource.TEMPLATE)
        return Resolution(matrix=template.merged(override), source=ResolutionSource.OVERRIDE)

    async def effective(self, principal: Principal) -> PermissionMatrix:
        """Effective matrix only; see resolve()."""
        resolution = await self.resolve(principal)
        return resolution.matrix

    def _fail_closed(self) -> Resolution:
        return Resolution(
            matrix=self._templates.denied_matrix(),
            source=ResolutionSource.FAIL_CLOSED,
        )
