"""Permission editor - draft edits of one user's matrix, saved as a full override."""

import logging

from pagegate.application.ports import PermissionStore
from pagegate.application.use_cases.permission.resolve_permissions import (
    PermissionResolver,
    Resolution,
    ResolutionSource,
)
from pagegate.domain.entities import (
    PermissionCell,
    PermissionMatrix,
    PermissionOverride,
    Principal,
)
from pagegate.domain.exceptions import NotFound, StoreUnavailable, ValidationError
from pagegate.domain.value_objects import Action, BulkMode

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("pagegate.audit")

CUSTOM_TEMPLATE = "Custom"


class PermissionEditor:
    """Edit session for one user's permissions.

    Role checks are not done here: callers reach the editor only after
    AccessGuard.meets_role(caller, Role.ADMINISTRATOR) passed. Saves are a
    blind full overwrite, so the last completed save wins.
    """

    def __init__(self, resolver: PermissionResolver, permission_store: PermissionStore) -> None:
        self._resolver = resolver
        self._store = permission_store
        self._catalog = resolver.templates.catalog
        self._generation = 0
        self.principal: Principal | None = None
        self.draft: PermissionMatrix | None = None
        self.active_template: str = CUSTOM_TEMPLATE
        self.dirty = False
        self.warnings: list[str] = []
        self._baseline: PermissionMatrix | None = None

    async def load(self, principal: Principal) -> Resolution | None:
        """Load principal's stored permissions into the draft.

        Inactive users are loaded as stored so saving keeps their override.

        Returns None when a newer load started meanwhile; that result is discarded.
        """
        self._generation += 1
        generation = self._generation
        resolution = await self._resolver.resolve_stored(principal)
        if generation != self._generation:
            logger.debug("Discarding superseded permission load for %s", principal.id)
            return None

        self.principal = principal
        self.draft = resolution.matrix.copy()
        self._baseline = resolution.matrix.copy()
        self.active_template = CUSTOM_TEMPLATE if resolution.has_override else principal.role
        self.warnings = list(resolution.warnings)
        self.dirty = False
        return resolution

    async def reset(self, principal: Principal) -> Resolution | None:
        """Drop unsaved edits and reload from the store."""
        return await self.load(principal)

    def toggle_cell(self, page_key: str, action: Action, value: bool) -> None:
        draft = self._require_draft()
        self._catalog.require(page_key)
        draft.set_cell(page_key, draft.cell(page_key).with_action(Action(action), value))
        self._mark_custom()

    def apply_role_template(self, role: str) -> None:
        self._require_draft()
        self.draft = self._resolver.templates.default_matrix(role)
        self.active_template = str(role)
        self.dirty = True

    def bulk_apply_to_group(self, group: str, mode: BulkMode) -> None:
        draft = self._require_draft()
        cell = PermissionCell.granting(BulkMode(mode).actions)
        for page in self._catalog.pages_in_group(group):
            draft.set_cell(page.key, cell)
        self._mark_custom()

    def bulk_apply_to_page(self, page_key: str, mode: BulkMode) -> None:
        draft = self._require_draft()
        self._catalog.require(page_key)
        draft.set_cell(page_key, PermissionCell.granting(BulkMode(mode).actions))
        self._mark_custom()

    async def copy_from_user(self, source: Principal) -> None:
        """Replace the draft with source's permissions (their template plus override)."""
        self._require_draft()
        resolution = await self._resolver.resolve_stored(source)
        if resolution.store_unavailable:
            raise StoreUnavailable(f"Permissions of user {source.id} could not be loaded")
        if resolution.source is ResolutionSource.FAIL_CLOSED:
            raise NotFound(f"User {source.id}")
        self.draft = resolution.matrix.copy()
        self._mark_custom()

    async def save(self, principal: Principal, actor: Principal | None = None) -> None:
        """Persist the entire draft as principal's override.

        StoreUnavailable propagates: an unconfirmed write is never treated as saved.
        """
        draft = self._require_draft()
        if principal.id != self.principal.id:
            raise ValidationError(
                f"Loaded permissions belong to user {self.principal.id}, not {principal.id}"
            )
        changed = self._baseline.changed_pages(draft) if self._baseline else draft.keys()
        await self._store.write_override(principal.id, PermissionOverride.from_matrix(draft))
        audit_logger.info(
            "permissions saved target=%s actor=%s template=%s changed=%s",
            principal.id,
            actor.id if actor else None,
            self.active_template,
            ",".join(changed) or "-",
        )
        self.dirty = False
        await self._refresh(principal)

    async def revert_to_role_default(
        self, principal: Principal, actor: Principal | None = None
    ) -> Resolution | None:
        """Overwrite the stored override with an empty one and reload."""
        await self._store.write_override(principal.id, PermissionOverride())
        audit_logger.info(
            "permissions reverted to role default target=%s actor=%s",
            principal.id,
            actor.id if actor else None,
        )
        return await self.load(principal)

    async def _refresh(self, principal: Principal) -> None:
        template = self.active_template
        resolution = await self._resolver.resolve_stored(principal)
        if not resolution.has_override:
            # read-back failed; the draft is what was written
            self.warnings = list(resolution.warnings)
            self._baseline = self.draft.copy() if self.draft else None
            return
        self.principal = principal
        self.draft = resolution.matrix.copy()
        self._baseline = resolution.matrix.copy()
        self.active_template = template
        self.warnings = list(resolution.warnings)

    def _mark_custom(self) -> None:
        self.active_template = CUSTOM_TEMPLATE
        self.dirty = True

    def _require_draft(self) -> PermissionMatrix:
        if self.draft is None:
            raise ValidationError("No user permissions loaded")
        return self.draft
