"""Access token issuance and validation use cases."""

from __future__ import annotations

from huskyci_token.application.dto.token import TokenRequest
from huskyci_token.application.ports.external import ExternalPort
from huskyci_token.domain.access_token import AccessToken
from huskyci_token.errors import InvalidAccessTokenError


class TokenHandler:
    """Issues access tokens and checks them against stored records.

    Holds no state besides the injected collaborator. Exceptions raised by the
    collaborator propagate unchanged.
    """

    def __init__(self, external: ExternalPort) -> None:
        self._external = external

    def generate_access_token(self, request: TokenRequest) -> AccessToken:
        """Mint, persist and return a new access token for the requested repository."""
        url = self._external.validate_url(request.repository_url)
        token = self._external.generate_token()
        access_token = AccessToken(
            husky_token=token,
            url=url,
            is_valid=True,
            created_at=self._external.now(),
        )
        self._external.store_access_token(access_token)
        return access_token

    def validate_token(self, token: str, repository_url: str) -> None:
        """Raise unless ``token`` is currently valid for ``repository_url``."""
        access_token = self._external.find_access_token(token, repository_url)
        if not access_token.is_valid:
            raise InvalidAccessTokenError()

    def verify_repo(self, repository_url: str) -> None:
        """Raise unless ``repository_url`` is well-formed and registered."""
        url = self._external.validate_url(repository_url)
        self._external.find_repo_url(url)


__all__ = ["TokenHandler"]
