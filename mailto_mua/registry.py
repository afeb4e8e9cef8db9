"""Registry of mail user agents known to the host application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

ComposeFunction = Callable[..., Any]


@dataclass(frozen=True)
class MailUserAgent:
    """A named mail user agent and its compose operation.

    ``compose`` receives the eight positional host fields: to, subject,
    other_headers, continue_editing, switch_function, yank_action,
    send_actions and return_action.
    """

    name: str
    compose: Optional[ComposeFunction] = None
    description: str = ""


class AgentRegistry:
    """Process-wide association of agent names to their operations.

    Besides the agents themselves the registry carries the host state the
    dispatcher consults: the name of the ``active`` composer and the
    ``send_hook`` a caller may have set before composing.
    """

    def __init__(self, agents: Optional[List[MailUserAgent]] = None, *, active: Optional[str] = None) -> None:
        self._agents: Dict[str, MailUserAgent] = {}
        for agent in agents or []:
            self.register(agent)
        self.active = active
        self.send_hook: Any = None

    def register(self, agent: MailUserAgent) -> None:
        self._agents[agent.name] = agent

    def unregister(self, name: str) -> None:
        self._agents.pop(name, None)

    def get(self, name: str) -> Optional[MailUserAgent]:
        return self._agents.get(name)

    def names(self) -> List[str]:
        return sorted(self._agents)

    def compose_function(self, name: str) -> Optional[ComposeFunction]:
        agent = self._agents.get(name)
        if agent is None:
            return None
        return agent.compose

    def __contains__(self, name: object) -> bool:
        return name in self._agents
