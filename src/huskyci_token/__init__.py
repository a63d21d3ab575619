"""Access token issuance and validation for CI security-scan submissions."""

from huskyci_token.application.dto.token import TokenRequest
from huskyci_token.application.ports.external import ExternalPort
from huskyci_token.application.token_handler import TokenHandler
from huskyci_token.domain.access_token import AccessToken
from huskyci_token.errors import (
    AccessTokenNotFoundError,
    InvalidAccessTokenError,
    InvalidRepositoryURLError,
    RepositoryNotFoundError,
    TokenError,
    TokenGenerationError,
    TokenStorageError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AccessToken",
    "AccessTokenNotFoundError",
    "ExternalPort",
    "InvalidAccessTokenError",
    "InvalidRepositoryURLError",
    "RepositoryNotFoundError",
    "TokenError",
    "TokenGenerationError",
    "TokenHandler",
    "TokenRequest",
    "TokenStorageError",
]
