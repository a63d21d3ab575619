"""Repository URL validation for git remotes."""

from __future__ import annotations

import logging
import re
from typing import Final

from huskyci_token.errors import InvalidRepositoryURLError

logger = logging.getLogger("huskyci_token.infrastructure.url")

_GIT_URL_PATTERN: Final = re.compile(
    r"((git|ssh|http(s)?)|(git@[\w.]+))(:(//)?)([\w.@:/\-~]+)(\.git)(/)?"
)
_FORBIDDEN_CHARACTERS: Final = frozenset(";&|$`<>()'\"\\{}*?!")


class RepositoryURLValidator:
    """Checks repository URLs against the accepted git remote grammar."""

    def __init__(self, *, pattern: re.Pattern[str] = _GIT_URL_PATTERN) -> None:
        self._pattern = pattern

    def __call__(self, url: str) -> str:
        return self.validate(url)

    def validate(self, url: str) -> str:
        """Return the canonical repository URL or raise ``InvalidRepositoryURLError``."""
        candidate = url.strip()
        if not candidate or _has_forbidden_characters(candidate):
            logger.debug("rejected repository url", extra={"data": {"url": candidate}})
            raise InvalidRepositoryURLError("Invalid URL format")
        if self._pattern.fullmatch(candidate) is None:
            logger.debug("repository url does not match", extra={"data": {"url": candidate}})
            raise InvalidRepositoryURLError("Invalid URL format")
        return candidate.removesuffix("/")


def _has_forbidden_characters(url: str) -> bool:
    return any(char in _FORBIDDEN_CHARACTERS or char.isspace() for char in url)


__all__ = ["RepositoryURLValidator"]
