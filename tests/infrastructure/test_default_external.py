from __future__ import annotations

from datetime import UTC, datetime

import pytest

from huskyci_token.application.dto.token import TokenRequest
from huskyci_token.application.token_handler import TokenHandler
from huskyci_token.errors import (
    AccessTokenNotFoundError,
    InvalidAccessTokenError,
    InvalidRepositoryURLError,
    RepositoryNotFoundError,
)
from huskyci_token.infrastructure.external import DefaultExternal
from huskyci_token.infrastructure.state.access_token_store import InMemoryAccessTokenStore
from huskyci_token.infrastructure.state.repository_registry import InMemoryRepositoryRegistry

REPO = "https://github.com/org/repo.git"
NOW = datetime(2025, 10, 17, 12, tzinfo=UTC)


def build_handler() -> tuple[TokenHandler, InMemoryAccessTokenStore, InMemoryRepositoryRegistry]:
    tokens = InMemoryAccessTokenStore(clock=lambda: NOW)
    repositories = InMemoryRepositoryRegistry([REPO])
    external = DefaultExternal(
        tokens=tokens,
        repositories=repositories,
        token_generator=lambda: "abc123",
        clock=lambda: NOW,
    )
    return TokenHandler(external), tokens, repositories


def test_issue_then_validate_round_trip() -> None:
    handler, tokens, _ = build_handler()

    issued = handler.generate_access_token(TokenRequest(repository_url=f"{REPO}/"))

    assert issued.url == REPO
    assert issued.husky_token == "abc123"
    assert issued.created_at == NOW
    assert tokens.find("abc123", REPO) == issued
    handler.validate_token("abc123", REPO)


def test_revoked_token_fails_validation() -> None:
    handler, tokens, _ = build_handler()
    handler.generate_access_token(TokenRequest(repository_url=REPO))

    tokens.revoke("abc123", REPO)

    with pytest.raises(InvalidAccessTokenError):
        handler.validate_token("abc123", REPO)


def test_unknown_token_fails_with_lookup_error() -> None:
    handler, _, _ = build_handler()

    with pytest.raises(AccessTokenNotFoundError):
        handler.validate_token("nope", REPO)


def test_issue_rejects_malformed_url_without_storing() -> None:
    handler, tokens, _ = build_handler()

    with pytest.raises(InvalidRepositoryURLError):
        handler.generate_access_token(TokenRequest(repository_url="myRepo.com"))

    assert len(tokens) == 0


def test_verify_repo_uses_registry() -> None:
    handler, _, repositories = build_handler()

    handler.verify_repo(f"  {REPO}/ ")

    with pytest.raises(RepositoryNotFoundError):
        handler.verify_repo("https://github.com/org/unknown.git")

    repositories.register("https://github.com/org/unknown.git")
    handler.verify_repo("https://github.com/org/unknown.git")


def test_validate_accepts_the_url_form_used_at_issuance() -> None:
    handler, _, _ = build_handler()
    presented = f"{REPO}/"

    handler.verify_repo(presented)
    issued = handler.generate_access_token(TokenRequest(repository_url=presented))

    assert issued.url == REPO
    handler.validate_token(issued.husky_token, presented)
    handler.validate_token(issued.husky_token, f"  {REPO} ")


def test_validate_rejects_malformed_url_before_lookup() -> None:
    handler, _, _ = build_handler()
    handler.generate_access_token(TokenRequest(repository_url=REPO))

    with pytest.raises(InvalidRepositoryURLError):
        handler.validate_token("abc123", "myRepo.com")
