"""Wall clock used for issuance timestamps."""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


__all__ = ["utc_now"]
