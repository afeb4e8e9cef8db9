"""Dispatch compose requests to the desktop mail client or a fallback agent."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .config import MuaConfig
from .errors import (
    FallbackLoopError,
    FallbackMisconfiguredError,
    FallbackNotConfiguredError,
    HookUnsupportedError,
)
from .launchers import LauncherChain, create_launchers
from .models import ComposeRequest
from .registry import AgentRegistry, MailUserAgent
from .uri import build_mailto_uri

logger = logging.getLogger(__name__)


class MailtoController:
    """Compose mail through the ``mailto:`` handler of the operating system.

    Requests that only carry a recipient and a subject are turned into a
    ``mailto:`` URI and handed to the first launcher that applies. Anything
    else (extra headers, yank or send actions, ...) cannot be expressed in a
    URI and goes to the fallback agent instead.
    """

    def __init__(
        self,
        registry: AgentRegistry,
        *,
        launchers: Optional[LauncherChain] = None,
        name: str = "mailto",
        fallback: Optional[str] = None,
    ) -> None:
        self.registry = registry
        self.launchers = launchers if launchers is not None else create_launchers()
        self.name = name
        self.fallback = fallback

    @classmethod
    def from_config(cls, config: MuaConfig, registry: AgentRegistry) -> "MailtoController":
        return cls(
            registry,
            launchers=create_launchers(config.launcher_order),
            name=config.agent_name,
            fallback=config.fallback_agent,
        )

    def compose(self, request: ComposeRequest) -> None:
        hook = self.registry.send_hook
        if hook:
            raise HookUnsupportedError(hook)

        complex_fields = request.complex_fields()
        if complex_fields:
            logger.debug("Request needs %s, delegating", ", ".join(complex_fields))
            self.delegate(request)
            return

        uri = build_mailto_uri(request.to, request.subject)
        logger.debug("Built %s", uri)
        self.launchers.launch(uri)

    def compose_mail(self, *args: Any) -> None:
        """Host entry point taking the eight positional compose fields."""

        self.compose(ComposeRequest.from_args(*args))

    def delegate(self, request: ComposeRequest) -> None:
        """Pass ``request`` unchanged to the fallback agent's compose operation."""

        name = self.fallback
        if not name:
            raise FallbackNotConfiguredError()
        if name == self.name:
            raise FallbackLoopError(name)

        compose = self.registry.compose_function(name)
        if compose is None:
            raise FallbackMisconfiguredError(name)
        if getattr(compose, "__self__", None) is self:
            raise FallbackLoopError(name)

        logger.info("Delegating compose request to %s", name)
        compose(*request.as_args())

    def as_agent(self) -> MailUserAgent:
        return MailUserAgent(
            name=self.name,
            compose=self.compose_mail,
            description="Compose mail with the desktop's default mail client",
        )

    def activate(self) -> None:
        """Make this controller the active composer.

        The composer that was active before is remembered as the fallback,
        but only the first time: activating again keeps the captured one.
        """

        self.registry.register(self.as_agent())
        previous = self.registry.active
        if self.fallback is None and previous and previous != self.name:
            self.fallback = previous
            logger.info("Captured %s as fallback mail user agent", previous)
        self.registry.active = self.name
        logger.info("Activated %s as mail user agent", self.name)

    def deactivate(self) -> None:
        if self.registry.active != self.name:
            return
        self.registry.active = self.fallback
        logger.info("Deactivated %s, active mail user agent is now %s", self.name, self.fallback)
