"""In-memory registry of repositories allowed to request scans."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from threading import Lock

from huskyci_token.errors import RepositoryNotFoundError
from huskyci_token.infrastructure.url import RepositoryURLValidator

logger = logging.getLogger("huskyci_token.infrastructure.state.repository_registry")


class InMemoryRepositoryRegistry:
    """Tracks registered repositories by canonical URL.

    ``register`` and ``unregister`` canonicalize their input; ``find`` expects the
    canonical URL already produced by URL validation.
    """

    def __init__(
        self,
        repositories: Iterable[str] = (),
        *,
        canonicalize: Callable[[str], str] | None = None,
    ) -> None:
        self._canonicalize = canonicalize or RepositoryURLValidator().validate
        self._repositories: set[str] = {self._canonicalize(url) for url in repositories}
        self._lock = Lock()

    def register(self, repository_url: str) -> str:
        """Register ``repository_url`` and return its canonical form."""
        canonical = self._canonicalize(repository_url)
        with self._lock:
            self._repositories.add(canonical)
        logger.info("registered repository", extra={"data": {"url": canonical}})
        return canonical

    def unregister(self, repository_url: str) -> None:
        canonical = self._canonicalize(repository_url)
        with self._lock:
            self._repositories.discard(canonical)

    def find(self, repository_url: str) -> None:
        with self._lock:
            known = repository_url in self._repositories
        if not known:
            raise RepositoryNotFoundError("Repository URL not found")

    def __contains__(self, repository_url: object) -> bool:
        with self._lock:
            return repository_url in self._repositories


__all__ = ["InMemoryRepositoryRegistry"]
