"""Access decisions returned by the guard."""

from dataclasses import dataclass
from enum import StrEnum


class Outcome(StrEnum):
    """Outcome of an access check."""

    ALLOWED = "allowed"
    DENIED = "denied"
    PENDING = "pending"


class DenialKind(StrEnum):
    """Why an access check was denied."""

    MISSING_PERMISSION = "missing_permission"
    WRONG_STATION = "wrong_station"
    INSUFFICIENT_ROLE = "insufficient_role"


@dataclass(frozen=True)
class Denial:
    """Denial reason the caller renders as feedback."""

    kind: DenialKind
    reason: str
    suggestion: str


@dataclass(frozen=True)
class Decision:
    """Result of AccessGuard checks.

    PENDING means the principal's permissions are still loading: callers
    must show a loading state rather than treat it as allow or deny.
    """

    outcome: Outcome
    denial: Denial | None = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(Outcome.ALLOWED)

    @classmethod
    def deny(cls, kind: DenialKind, reason: str, suggestion: str) -> "Decision":
        return cls(Outcome.DENIED, Denial(kind=kind, reason=reason, suggestion=suggestion))

    @classmethod
    def pending(cls) -> "Decision":
        return cls(Outcome.PENDING)

    @property
    def allowed(self) -> bool:
        return self.outcome is Outcome.ALLOWED

    @property
    def denied(self) -> bool:
        return self.outcome is Outcome.DENIED

    @property
    def is_pending(self) -> bool:
        return self.outcome is Outcome.PENDING
