"""Opaque token generation backed by the OS entropy source."""

from __future__ import annotations

import base64
import hashlib
import logging
import secrets
from collections.abc import Callable

from huskyci_token.errors import TokenGenerationError

logger = logging.getLogger("huskyci_token.infrastructure.token_generator")

DEFAULT_TOKEN_BYTES = 32


class UrlSafeTokenGenerator:
    """Produces URL-safe base64 tokens from random bytes."""

    def __init__(
        self,
        *,
        num_bytes: int = DEFAULT_TOKEN_BYTES,
        random_bytes: Callable[[int], bytes] | None = None,
    ) -> None:
        if num_bytes <= 0:
            raise ValueError("num_bytes must be positive")
        self._num_bytes = num_bytes
        self._random_bytes = random_bytes or secrets.token_bytes

    def __call__(self) -> str:
        return self.generate()

    def generate(self) -> str:
        try:
            raw = self._random_bytes(self._num_bytes)
        except (OSError, NotImplementedError) as exc:
            logger.warning(
                "entropy source unavailable",
                extra={"data": {"num_bytes": self._num_bytes, "error": str(exc)}},
            )
            raise TokenGenerationError("Failed to generate token") from exc
        if len(raw) != self._num_bytes:
            raise TokenGenerationError("Failed to generate token")
        token = base64.urlsafe_b64encode(raw).decode("ascii")
        logger.debug("generated token", extra={"data": {"fingerprint": fingerprint(token)}})
        return token


def fingerprint(token: str) -> str:
    """Short digest of ``token`` that is safe to log."""
    return hashlib.blake2b(token.encode("utf-8"), digest_size=6).hexdigest()


__all__ = ["DEFAULT_TOKEN_BYTES", "UrlSafeTokenGenerator", "fingerprint"]
