from __future__ import annotations

import pytest

from mailto_mua.registry import AgentRegistry


@pytest.fixture()
def registry() -> AgentRegistry:
    return AgentRegistry()


@pytest.fixture()
def no_display(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DISPLAY", raising=False)
    monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("MAILTO_MUA_NAME", "MAILTO_MUA_FALLBACK", "MAILTO_MUA_LAUNCHERS", "MAILTO_MUA_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
