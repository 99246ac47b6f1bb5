"""
SpeechSystem - appending spoken messages and forgetting old ones.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

from ..core.types import MESSAGE_RETENTION_TURNS
from ..world.state import Message
from .resolution import PhaseResult, Submission

if TYPE_CHECKING:
    from ..world.state import GameState


class SpeechSystem:
    """Stateless handler for speak actions and the message log."""

    def resolve(self, state: GameState, submissions: Sequence[Submission], turn: int) -> PhaseResult:
        """
        Append one message per living speaker.

        Args:
            state: Working state (messages appended in-place)
            submissions: Validated (agent, SPEAK action) pairs
            turn: Turn number the messages are stamped with
        """
        result = PhaseResult()
        for agent, action in submissions:
            if not agent.alive:
                result.fail(agent, action, f"{agent.label()} cannot speak (dead)")
                continue
            state.messages.append(
                Message(
                    turn=turn,
                    agent_id=agent.id,
                    agent_name=agent.name,
                    content=action.message,
                    position=agent.position,
                )
            )
            result.succeed(agent, action, f'{agent.label()} says "{action.message}"')
        return result

    def prune(self, state: GameState, turn: int) -> int:
        """
        Drop messages older than the retention window relative to `turn`.

        Returns:
            Number of messages dropped
        """
        kept = [m for m in state.messages if turn - m.turn <= MESSAGE_RETENTION_TURNS]
        dropped = len(state.messages) - len(kept)
        state.messages = kept
        return dropped
