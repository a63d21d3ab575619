"""In-memory storage for issued access tokens."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from threading import Lock

from huskyci_token.domain.access_token import AccessToken
from huskyci_token.errors import AccessTokenNotFoundError, TokenStorageError
from huskyci_token.infrastructure.clock import utc_now
from huskyci_token.infrastructure.token_generator import fingerprint

logger = logging.getLogger("huskyci_token.infrastructure.state.access_token_store")

_Key = tuple[str, str]


class InMemoryAccessTokenStore:
    """Stores access token records for the lifetime of the process.

    Records are keyed by ``(token, repository_url)``. When ``max_age`` is set,
    lookups of records older than ``max_age`` return an invalidated copy.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] | None = None,
        max_age: timedelta | None = None,
    ) -> None:
        if max_age is not None and max_age <= timedelta(0):
            raise ValueError("max_age must be positive")
        self._clock = clock or utc_now
        self._max_age = max_age
        self._tokens: dict[_Key, AccessToken] = {}
        self._lock = Lock()

    def store(self, access_token: AccessToken) -> None:
        key = (access_token.husky_token, access_token.url)
        with self._lock:
            existing = self._tokens.get(key)
            if existing is not None and self._current(existing).is_valid:
                raise TokenStorageError("access token already registered for repository")
            self._tokens[key] = access_token
        logger.info(
            "stored access token",
            extra={"data": {"url": access_token.url, "fingerprint": fingerprint(access_token.husky_token)}},
        )

    def find(self, token: str, repository_url: str) -> AccessToken:
        with self._lock:
            access_token = self._tokens.get((token, repository_url))
        if access_token is None:
            logger.debug(
                "access token lookup missed",
                extra={"data": {"url": repository_url, "fingerprint": fingerprint(token)}},
            )
            raise AccessTokenNotFoundError("Could not find current access token")
        return self._current(access_token)

    def revoke(self, token: str, repository_url: str) -> AccessToken:
        """Flag the stored record as invalid and return the updated copy."""
        key = (token, repository_url)
        with self._lock:
            access_token = self._tokens.get(key)
            if access_token is None:
                raise AccessTokenNotFoundError("Could not find current access token")
            revoked = access_token.invalidate()
            self._tokens[key] = revoked
        logger.info(
            "revoked access token",
            extra={"data": {"url": repository_url, "fingerprint": fingerprint(token)}},
        )
        return revoked

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

    def _current(self, access_token: AccessToken) -> AccessToken:
        if not access_token.is_valid or self._max_age is None:
            return access_token
        if access_token.is_older_than(self._max_age, now=self._clock()):
            return access_token.invalidate()
        return access_token


__all__ = ["InMemoryAccessTokenStore"]
