"""Errors related to catalog interfaces.

Read paths never raise these; they return None or an empty list. Write paths
raise them and callers render the message.
"""


class CatalogError(Exception):
    """Base class for all catalog-related errors."""

    def __init__(self, kind: str, key: str, message: str | None = None) -> None:
        if message is None:
            message = f"{kind} ({key}) catalog error"
        super().__init__(message)
        self.kind = kind
        self.key = key


class NotFoundError(CatalogError):
    """Raised when a write targets a record that does not exist."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(kind, key, f"{kind} ({key}) not found")


class AuthRequiredError(CatalogError):
    """Raised when a write is attempted without an authenticated actor."""

    def __init__(self, kind: str, action: str) -> None:
        super().__init__(kind, action, f"You must be signed in to {action}.")
        self.action = action


class ValidationFailedError(CatalogError):
    """Raised when a write is missing required fields."""

    def __init__(self, kind: str, key: str, reason: str) -> None:
        super().__init__(kind, key, f"Invalid {kind} ({key}): {reason}")
        self.reason = reason


class UpstreamUnavailableError(CatalogError):
    """Raised when the backing store fails during a write."""

    def __init__(self, kind: str, key: str, reason: str) -> None:
        super().__init__(kind, key, f"{kind} ({key}) store unavailable: {reason}")
        self.reason = reason
