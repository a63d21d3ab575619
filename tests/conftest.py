from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def isolate_token_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep developer shells from leaking token settings into tests
    for name in list(os.environ):
        if name.upper().startswith("HUSKYCI_"):
            monkeypatch.delenv(name, raising=False)
