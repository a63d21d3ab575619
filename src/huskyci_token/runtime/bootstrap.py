"""Runtime wiring for the token service."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from huskyci_token.application.token_handler import TokenHandler
from huskyci_token.infrastructure.clock import utc_now
from huskyci_token.infrastructure.external import DefaultExternal
from huskyci_token.infrastructure.state.access_token_store import InMemoryAccessTokenStore
from huskyci_token.infrastructure.state.repository_registry import InMemoryRepositoryRegistry
from huskyci_token.infrastructure.token_generator import UrlSafeTokenGenerator
from huskyci_token.infrastructure.url import RepositoryURLValidator
from huskyci_token.observability.logging import init_logging
from huskyci_token.runtime.settings import Settings

logger = logging.getLogger("huskyci_token.runtime")


@dataclass(frozen=True, slots=True)
class RuntimeContext:
    """Aggregated runtime components for the token service."""

    settings: Settings
    token_store: InMemoryAccessTokenStore
    repository_registry: InMemoryRepositoryRegistry
    external: DefaultExternal
    token_handler: TokenHandler


def build_runtime(
    settings: Settings | None = None,
    *,
    configure_logging: bool = False,
) -> RuntimeContext:
    """Construct the token handler and the adapters behind it.

    ``configure_logging`` installs the console logging config before settings load.
    """
    if configure_logging:
        init_logging()
    resolved = settings or Settings.load()

    url_validator = RepositoryURLValidator()
    repositories = InMemoryRepositoryRegistry(
        resolved.token.registered_repositories, canonicalize=url_validator.validate
    )
    token_store = InMemoryAccessTokenStore(clock=utc_now, max_age=resolved.token.token_max_age)
    external = DefaultExternal(
        tokens=token_store,
        repositories=repositories,
        url_validator=url_validator,
        token_generator=UrlSafeTokenGenerator(num_bytes=resolved.token.token_bytes),
        clock=utc_now,
    )
    logger.info(
        "token runtime ready",
        extra={
            "data": {
                "registered_repositories": len(resolved.token.registered_repositories),
                "token_bytes": resolved.token.token_bytes,
                "token_max_age_seconds": resolved.token.token_max_age_seconds,
            }
        },
    )
    return RuntimeContext(
        settings=resolved,
        token_store=token_store,
        repository_registry=repositories,
        external=external,
        token_handler=TokenHandler(external),
    )


__all__ = ["RuntimeContext", "build_runtime"]
