"""DTOs for the access token use cases."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TokenRequest:
    """Input payload for issuing an access token.

    ``metadata`` carries client-supplied fields that issuance passes over.
    """

    repository_url: str
    metadata: Mapping[str, Any] = field(default_factory=dict)


__all__ = ["TokenRequest"]
