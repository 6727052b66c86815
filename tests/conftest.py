from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from interactor.config import reset_settings
from interactor.config.settings import FULL_MESSAGE_FORMAT_VAR, LOG_LEVEL_VAR

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)
    monkeypatch.delenv(FULL_MESSAGE_FORMAT_VAR, raising=False)
    reset_settings()
    try:
        yield
    finally:
        reset_settings()
