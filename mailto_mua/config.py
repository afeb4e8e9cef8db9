"""Application configuration utilities."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .launchers import DEFAULT_LAUNCHER_ORDER

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class MuaConfig:
    """Configuration container for the mailto dispatcher."""

    agent_name: str = "mailto"
    fallback_agent: Optional[str] = None
    launcher_order: Tuple[str, ...] = DEFAULT_LAUNCHER_ORDER
    log_level: str = "WARNING"

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _parse_launchers(raw: str | None) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_LAUNCHER_ORDER
    names = tuple(part.strip().lower() for part in raw.split(",") if part.strip())
    return names or DEFAULT_LAUNCHER_ORDER


def load_config() -> MuaConfig:
    """Load configuration from environment variables."""

    agent_name = os.getenv("MAILTO_MUA_NAME", "").strip() or "mailto"
    fallback_agent = os.getenv("MAILTO_MUA_FALLBACK", "").strip() or None
    launcher_order = _parse_launchers(os.getenv("MAILTO_MUA_LAUNCHERS"))

    log_level = os.getenv("MAILTO_MUA_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "WARNING"

    return MuaConfig(
        agent_name=agent_name,
        fallback_agent=fallback_agent,
        launcher_order=launcher_order,
        log_level=log_level,
    )
