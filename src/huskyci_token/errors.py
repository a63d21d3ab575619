"""Exceptions raised by the token core and its collaborators."""

from __future__ import annotations


class TokenError(Exception):
    """Base class for access-token failures."""


class InvalidRepositoryURLError(TokenError, ValueError):
    """Raised when a repository URL is malformed or fails policy."""


class TokenGenerationError(TokenError, RuntimeError):
    """Raised when the token source cannot produce a new token."""


class TokenStorageError(TokenError, RuntimeError):
    """Raised when an access token cannot be persisted."""


class AccessTokenNotFoundError(TokenError, LookupError):
    """Raised when no access token matches the presented token and repository."""


class RepositoryNotFoundError(TokenError, LookupError):
    """Raised when a repository URL has not been registered."""


class InvalidAccessTokenError(TokenError, PermissionError):
    """Raised when a stored access token exists but is flagged invalid."""

    def __init__(self, message: str = "Access token is invalid") -> None:
        super().__init__(message)


__all__ = [
    "AccessTokenNotFoundError",
    "InvalidAccessTokenError",
    "InvalidRepositoryURLError",
    "RepositoryNotFoundError",
    "TokenError",
    "TokenGenerationError",
    "TokenStorageError",
]
