"""Compose mail with the desktop's default mail client."""

from .config import MuaConfig, load_config
from .controller import MailtoController
from .errors import (
    FallbackLoopError,
    FallbackMisconfiguredError,
    FallbackNotConfiguredError,
    HookUnsupportedError,
    MailClientError,
    NoMUAError,
    UnknownLauncherError,
)
from .launchers import LauncherChain, create_launchers
from .models import ComposeRequest
from .registry import AgentRegistry, MailUserAgent
from .uri import build_mailto_uri

__all__ = [
    "AgentRegistry",
    "ComposeRequest",
    "FallbackLoopError",
    "FallbackMisconfiguredError",
    "FallbackNotConfiguredError",
    "HookUnsupportedError",
    "LauncherChain",
    "MailClientError",
    "MailUserAgent",
    "MailtoController",
    "MuaConfig",
    "NoMUAError",
    "UnknownLauncherError",
    "build_mailto_uri",
    "create_launchers",
    "load_config",
]
