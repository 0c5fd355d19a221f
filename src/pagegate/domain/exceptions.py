"""Domain exceptions."""


class PageGateError(Exception):
    """Base exception for pagegate."""

    pass


class NotFound(PageGateError):
    """Requested resource was not found."""

    pass


class ValidationError(PageGateError):
    """Validation failed for input data."""

    pass


class MalformedOverride(PageGateError):
    """Stored permission override document does not have the expected shape."""

    pass


class StoreUnavailable(PageGateError):
    """Backing profile store could not be reached."""

    pass


class UnknownPrincipal(PageGateError):
    """No user profile exists for the principal."""

    def __init__(self, user_id: object) -> None:
        super().__init__(f"No profile for user {user_id}")
        self.user_id = user_id
