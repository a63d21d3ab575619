"""Default ``ExternalPort`` assembled from the in-process adapters."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from huskyci_token.application.ports.external import ExternalPort
from huskyci_token.domain.access_token import AccessToken
from huskyci_token.infrastructure.clock import utc_now
from huskyci_token.infrastructure.state.access_token_store import InMemoryAccessTokenStore
from huskyci_token.infrastructure.state.repository_registry import InMemoryRepositoryRegistry
from huskyci_token.infrastructure.token_generator import UrlSafeTokenGenerator
from huskyci_token.infrastructure.url import RepositoryURLValidator


class DefaultExternal(ExternalPort):
    """Delegates each capability to a dedicated adapter."""

    def __init__(
        self,
        *,
        tokens: InMemoryAccessTokenStore,
        repositories: InMemoryRepositoryRegistry,
        url_validator: Callable[[str], str] | None = None,
        token_generator: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._tokens = tokens
        self._repositories = repositories
        self._validate_url = url_validator or RepositoryURLValidator()
        self._generate_token = token_generator or UrlSafeTokenGenerator()
        self._clock = clock or utc_now

    def validate_url(self, url: str) -> str:
        return self._validate_url(url)

    def generate_token(self) -> str:
        return self._generate_token()

    def now(self) -> datetime:
        return self._clock()

    def store_access_token(self, access_token: AccessToken) -> None:
        self._tokens.store(access_token)

    def find_access_token(self, token: str, repository_url: str) -> AccessToken:
        # records are keyed by the canonical URL stored at issuance
        return self._tokens.find(token, self._validate_url(repository_url))

    def find_repo_url(self, repository_url: str) -> None:
        self._repositories.find(repository_url)


__all__ = ["DefaultExternal"]
