"""Errors raised by Azure DevOps commands."""

from collections.abc import Sequence


class AzureDevOpsError(Exception):
    """Base class for all errors raised by this package."""


class MissingCredentialError(AzureDevOpsError):
    """Raised when a required credential is absent or blank."""

    def __init__(self, missing: Sequence[str], hints: Sequence[str] = ()) -> None:
        self.missing = tuple(missing)
        message = f"Missing required credential(s): {', '.join(self.missing)}"
        if hints:
            message = f"{message} ({'; '.join(hints)})"
        super().__init__(message)


class UpstreamRequestError(AzureDevOpsError):
    """Raised when the Azure DevOps API cannot be reached or rejects a request.

    ``status`` is ``None`` for transport failures and timeouts, where no
    HTTP response was received.
    """

    def __init__(
        self, *, method: str, url: str, status: int | None, message: str
    ) -> None:
        self.method = method
        self.url = url
        self.status = status
        self.message = message
        reason = message if status is None else f"{status} {message}"
        super().__init__(f"{method} {url} failed: {reason}")


class InvalidArgumentError(AzureDevOpsError, ValueError):
    """Raised when a command argument fails client-side validation."""
