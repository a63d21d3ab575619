from __future__ import annotations

from datetime import UTC, datetime

from huskyci_token.application.ports.external import ExternalPort
from huskyci_token.domain.access_token import AccessToken


class FakeExternal(ExternalPort):
    """Scripted collaborator that records every call it receives."""

    def __init__(
        self,
        *,
        url: str = "",
        validate_error: Exception | None = None,
        token: str = "",
        generate_error: Exception | None = None,
        now: datetime | None = None,
        store_error: Exception | None = None,
        access_token: AccessToken | None = None,
        find_access_error: Exception | None = None,
        find_repo_error: Exception | None = None,
    ) -> None:
        self.url = url
        self.validate_error = validate_error
        self.token = token
        self.generate_error = generate_error
        self.current_time = now or datetime(2025, 10, 17, 12, tzinfo=UTC)
        self.store_error = store_error
        self.access_token = access_token
        self.find_access_error = find_access_error
        self.find_repo_error = find_repo_error
        self.calls: list[tuple[str, tuple[object, ...]]] = []
        self.stored: list[AccessToken] = []

    def validate_url(self, url: str) -> str:
        self.calls.append(("validate_url", (url,)))
        if self.validate_error is not None:
            raise self.validate_error
        return self.url

    def generate_token(self) -> str:
        self.calls.append(("generate_token", ()))
        if self.generate_error is not None:
            raise self.generate_error
        return self.token

    def now(self) -> datetime:
        self.calls.append(("now", ()))
        return self.current_time

    def store_access_token(self, access_token: AccessToken) -> None:
        self.calls.append(("store_access_token", (access_token,)))
        if self.store_error is not None:
            raise self.store_error
        self.stored.append(access_token)

    def find_access_token(self, token: str, repository_url: str) -> AccessToken:
        self.calls.append(("find_access_token", (token, repository_url)))
        if self.find_access_error is not None:
            raise self.find_access_error
        if self.access_token is None:
            return AccessToken(husky_token="", url="", is_valid=False, created_at=self.current_time)
        return self.access_token

    def find_repo_url(self, repository_url: str) -> None:
        self.calls.append(("find_repo_url", (repository_url,)))
        if self.find_repo_error is not None:
            raise self.find_repo_error

    def called(self, name: str) -> bool:
        return any(call_name == name for call_name, _ in self.calls)


__all__ = ["FakeExternal"]
