"""
Text command parsing.

Turns a line such as `ACTION: build(up, stone)` into an Action. Useful for
scripted runs and for policies that produce free-form text. Accepted forms:

- move(dir), gather(dir), hit(dir)     dir in up/down/left/right
- build(dir, block)
- speak("message"), think("thought")
- wait, eat
"""

from __future__ import annotations

import re
from typing import Optional

from gridlife.core.actions import Action
from gridlife.core.types import BlockType, Direction

_DIR = r"(up|down|left|right)"

_ACTION_LINE = re.compile(r"ACTION:\s*(.+)", re.IGNORECASE)
_DIRECTIONAL = re.compile(rf"^(move|gather|hit)\(\s*{_DIR}\s*\)$", re.IGNORECASE)
_BUILD = re.compile(rf"^build\(\s*{_DIR}\s*,\s*([a-z_]+)\s*\)$", re.IGNORECASE)
_QUOTED = re.compile(r'^(speak|think)\(\s*"(.+)"\s*\)$', re.IGNORECASE)


def parse_action(text: str) -> Optional[Action]:
    """
    Parse one command, optionally prefixed by `ACTION:`.

    Returns:
        The Action, or None when the text is not a recognizable command
    """
    match = _ACTION_LINE.search(text)
    command = (match.group(1) if match else text).strip()
    lowered = command.lower()

    directional = _DIRECTIONAL.match(command)
    if directional:
        kind, direction = directional.group(1).lower(), Direction(directional.group(2).lower())
        if kind == "move":
            return Action.move(direction)
        if kind == "gather":
            return Action.gather(direction)
        return Action.hit(direction)

    build = _BUILD.match(command)
    if build:
        try:
            block = BlockType(build.group(2).lower())
        except ValueError:
            return None
        return Action.build(Direction(build.group(1).lower()), block)

    quoted = _QUOTED.match(command)
    if quoted:
        if quoted.group(1).lower() == "speak":
            return Action.speak(quoted.group(2))
        return Action.think(quoted.group(2))

    if lowered == "wait":
        return Action.wait()
    if lowered == "eat":
        return Action.eat()

    # Last resort for chatty output
    if "wait" in lowered:
        return Action.wait()
    if "eat" in lowered:
        return Action.eat()
    return None
