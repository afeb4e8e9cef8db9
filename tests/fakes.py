"""Test doubles shared across the test suite."""

from __future__ import annotations

from typing import List

from mailto_mua.launchers import BaseLauncher


class RecordingLauncher(BaseLauncher):
    """Launcher double that records the URIs it was asked to open."""

    def __init__(self, name: str, *, applicable: bool = True) -> None:
        self.name = name
        self.applicable = applicable
        self.applies_calls = 0
        self.opened: List[str] = []

    def applies(self) -> bool:
        self.applies_calls += 1
        return self.applicable

    def launch(self, uri: str) -> None:
        self.opened.append(uri)


class RecordingAgent:
    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def __call__(self, *args):  # type: ignore[no-untyped-def]
        self.calls.append(args)
