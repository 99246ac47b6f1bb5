from __future__ import annotations

from typing import Any, List, Optional, Sequence

from gridlife.core.actions import Action
from gridlife.world.perception import AgentView
from infra.logger import get_logger

from .base_agent import BaseAgent
from .parser import parse_action
from .registry import register_agent

log = get_logger(__name__)


@register_agent("scripted")
class ScriptedAgent(BaseAgent):
    """
    Plays a fixed list of text commands in order, then waits.

    Commands use the parse_action() syntax, e.g. ["move(up)", "gather(left)", "eat"].
    Unparseable commands become WAIT.
    """

    def __init__(
        self,
        agent_id: str,
        name: Optional[str] = None,
        commands: Sequence[str] = (),
        **_: Any,
    ):
        super().__init__(agent_id, name)
        self.commands: List[str] = list(commands)
        self._cursor = 0

    def act(self, view: AgentView) -> Action:
        if self._cursor >= len(self.commands):
            return Action.wait()

        command = self.commands[self._cursor]
        self._cursor += 1
        action = parse_action(command)
        if action is None:
            log.warning("%s: cannot parse command %r; waiting", self, command)
            return Action.wait()
        return action

    def reset(self) -> None:
        self._cursor = 0
