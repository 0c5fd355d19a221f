"""Application ports - interfaces for external adapters."""

from pagegate.application.ports.permission_store import PermissionStore
from pagegate.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionStore",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
