"""Access guard - the single place UI actions are authorized."""

from pagegate.application.use_cases.permission.resolve_permissions import PermissionResolver
from pagegate.domain.entities import PermissionMatrix, Principal
from pagegate.domain.value_objects import Action, Decision, DenialKind, Role


def meets_role(principal: Principal, min_role: Role) -> bool:
    """True when principal's role ranks at or above min_role."""
    return principal.level >= Role(min_role).level


def evaluate(
    principal: Principal,
    matrix: PermissionMatrix,
    page_key: str,
    action: Action,
    target_station: str | None = None,
    min_role: Role | None = None,
    require_all_stations: bool = False,
) -> Decision:
    """Check permission, then station, then role against a resolved matrix."""
    action = Action(action)
    if not matrix.allows(page_key, action):
        return Decision.deny(
            DenialKind.MISSING_PERMISSION,
            f"You don't have permission to {action.value} {page_key}.",
            f"Contact your administrator to request {action.value} access for {page_key}.",
        )

    if target_station and not principal.has_all_stations and principal.station != target_station:
        return Decision.deny(
            DenialKind.WRONG_STATION,
            f"You don't have access to {target_station} station data.",
            f"Your current access is limited to {principal.station or 'no station'}. "
            "Contact your administrator for multi-station access.",
        )
    if require_all_stations and not principal.has_all_stations:
        return Decision.deny(
            DenialKind.WRONG_STATION,
            "This feature requires access to all stations.",
            "Contact your administrator to request cross-station management privileges.",
        )

    if min_role is not None and not meets_role(principal, min_role):
        return Decision.deny(
            DenialKind.INSUFFICIENT_ROLE,
            f"This feature requires {Role(min_role).value} role or higher.",
            f"Your current role is {principal.role}. Contact your administrator for role upgrade.",
        )

    return Decision.allow()


class PrincipalAccess:
    """Guard bound to one principal; checks stay pending until load() completes."""

    def __init__(self, resolver: PermissionResolver, principal: Principal) -> None:
        self._resolver = resolver
        self.principal = principal
        self._matrix: PermissionMatrix | None = None

    @property
    def loading(self) -> bool:
        return self._matrix is None

    async def load(self) -> None:
        self._matrix = await self._resolver.effective(self.principal)

    def check(
        self,
        page_key: str,
        action: Action,
        target_station: str | None = None,
        min_role: Role | None = None,
        require_all_stations: bool = False,
    ) -> Decision:
        if self._matrix is None:
            return Decision.pending()
        return evaluate(
            self.principal,
            self._matrix,
            page_key,
            action,
            target_station=target_station,
            min_role=min_role,
            require_all_stations=require_all_stations,
        )


class AccessGuard:
    """Answers "may principal do action on page in station?" with a Decision."""

    def __init__(self, resolver: PermissionResolver) -> None:
        self._resolver = resolver

    @staticmethod
    def meets_role(principal: Principal, min_role: Role) -> bool:
        return meets_role(principal, min_role)

    async def allow(
        self,
        principal: Principal,
        page_key: str,
        action: Action,
        target_station: str | None = None,
        min_role: Role | None = None,
        require_all_stations: bool = False,
    ) -> Decision:
        matrix = await self._resolver.effective(principal)
        return evaluate(
            principal,
            matrix,
            page_key,
            action,
            target_station=target_station,
            min_role=min_role,
            require_all_stations=require_all_stations,
        )

    def for_principal(self, principal: Principal) -> PrincipalAccess:
        return PrincipalAccess(self._resolver, principal)
