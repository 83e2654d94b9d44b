"""Exceptions raised while loading conversation exports."""

from typing import Optional


class ChatExplorerError(Exception):
    """Base class for export loading failures.

    Carries the filesystem path and, for archives, the member name the
    failure relates to.
    """

    def __init__(self, message: str, path: Optional[str] = None, member: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.member = member


class PathRequiredError(ChatExplorerError, ValueError):
    """No path was supplied."""


class OpenError(ChatExplorerError):
    """A file or archive member could not be opened."""

    @property
    def is_permission_error(self) -> bool:
        """True when the underlying failure was a permission denial."""
        return isinstance(self.__cause__, PermissionError)


class ArchiveOpenError(ChatExplorerError):
    """The input is not a readable zip archive."""


class NotFoundError(ChatExplorerError):
    """The archive holds no conversations payload."""


class DecodeError(ChatExplorerError):
    """The payload is not a JSON array of conversations."""


class CloseError(ChatExplorerError):
    """A resource could not be released after a successful decode."""


class WriteError(ChatExplorerError):
    """Loaded entries could not be written out."""
