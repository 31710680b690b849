"""gits exception hierarchy."""

from typing import Any


class GitsError(Exception):
    """Base exception for all gits errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(GitsError):
    """Error in gits configuration."""

    pass


class NotAPrimaryRepositoryError(GitsError):
    """The working directory has no primary .git directory."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class SecondaryRepoNotInitializedError(GitsError):
    """The .gits directory does not exist yet."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class DelegateError(GitsError):
    """Base error for failures of the delegated git process."""

    def __init__(
        self,
        message: str,
        command: str | None = None,
        exit_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.command = command
        self.exit_code = exit_code


class DelegateInitFailedError(DelegateError):
    """git init for the secondary repository exited non-zero."""

    pass


class DelegateSpawnFailedError(DelegateError):
    """The git executable could not be started."""

    pass


class FilesystemError(GitsError):
    """A filesystem operation on a gits-managed path failed."""

    def __init__(self, message: str, operation: str, path: str) -> None:
        super().__init__(message, {"operation": operation, "path": path})
        self.operation = operation
        self.path = path
