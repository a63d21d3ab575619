"""Port describing the collaborators the token core depends on."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from huskyci_token.domain.access_token import AccessToken


class ExternalPort(Protocol):
    """URL validation, token minting, clock, token storage and repository lookup.

    Every method except ``now`` may raise; callers propagate the exception as-is.
    """

    def validate_url(self, url: str) -> str:
        """Return the canonical form of ``url`` or raise if it is malformed."""

    def generate_token(self) -> str:
        """Return a new opaque token string."""

    def now(self) -> datetime:
        """Return the current timestamp."""

    def store_access_token(self, access_token: AccessToken) -> None:
        """Persist ``access_token``."""

    def find_access_token(self, token: str, repository_url: str) -> AccessToken:
        """Return the stored record for ``token`` and ``repository_url``."""

    def find_repo_url(self, repository_url: str) -> None:
        """Return normally when ``repository_url`` is registered, raise otherwise."""


__all__ = ["ExternalPort"]
