"""Access token record issued to a repository."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta


@dataclass(frozen=True, slots=True)
class AccessToken:
    """Persisted credential authorizing a repository to submit scans.

    ``is_valid`` is the sole source of truth for whether the token currently
    authorizes access; a stored record may be present yet invalid.
    """

    husky_token: str
    url: str
    is_valid: bool
    created_at: datetime

    def invalidate(self) -> AccessToken:
        """Return a copy flagged as no longer valid."""
        return replace(self, is_valid=False)

    def is_older_than(self, max_age: timedelta, *, now: datetime) -> bool:
        """Return ``True`` once ``max_age`` has elapsed since issuance."""
        if max_age <= timedelta(0):
            raise ValueError("max_age must be positive")
        return now - self.created_at >= max_age


__all__ = ["AccessToken"]
