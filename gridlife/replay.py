"""
Replay files - a JSON record of every turn of one run.

A replay holds metadata (engine version, timestamps, config, status) and the
full serialized GameState of each turn, oldest first. The writer rewrites
the whole file after every turn through a temporary file, so a crashed run
still leaves a readable replay behind.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from infra.logger import get_logger
from infra.paths import REPLAY_STORAGE_DIR

from .core.config import GameConfig
from .world.state import GameState

log = get_logger(__name__)

ENGINE_VERSION = "0.1.0"

STATUS_RUNNING = "running"
STATUS_COMPLETED = "completed"
STATUS_CRASHED = "crashed"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ReplayMetadata:
    engine_version: str
    created_at: str
    last_updated_at: str
    config: GameConfig
    final_turn: int = 0
    status: str = STATUS_RUNNING
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "engine_version": self.engine_version,
            "created_at": self.created_at,
            "last_updated_at": self.last_updated_at,
            "config": self.config.to_dict(),
            "final_turn": self.final_turn,
            "status": self.status,
        }
        if self.error is not None:
            data["error"] = self.error
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ReplayMetadata:
        return cls(
            engine_version=data["engine_version"],
            created_at=data["created_at"],
            last_updated_at=data["last_updated_at"],
            config=GameConfig.from_dict(data["config"]),
            final_turn=data.get("final_turn", 0),
            status=data.get("status", STATUS_RUNNING),
            error=data.get("error"),
        )


@dataclass
class Replay:
    metadata: ReplayMetadata
    turns: List[GameState] = field(default_factory=list)


class ReplayWriter:
    """
    Accumulates turn snapshots and keeps the replay file on disk current.

    Usage:
        writer = ReplayWriter(state.config)
        writer.initialize(state)
        ... writer.append_turn(next_state) ...
        writer.finalize()
    """

    def __init__(self, config: GameConfig, output_dir: str | Path = REPLAY_STORAGE_DIR):
        self.output_dir = Path(output_dir)
        created = _now()
        stamp = created.replace(":", "-").replace(".", "-").replace("+", "_")
        self.path = self.output_dir / f"replay_{stamp}.json"
        self.metadata = ReplayMetadata(
            engine_version=ENGINE_VERSION,
            created_at=created,
            last_updated_at=created,
            config=config,
        )
        self._turns: List[Dict[str, Any]] = []

    def initialize(self, initial_state: GameState) -> Path:
        """Create the output directory and write the turn-0 snapshot."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.append_turn(initial_state)
        return self.path

    def append_turn(self, state: GameState) -> None:
        self._turns.append(state.to_dict())
        self.metadata.final_turn = state.turn
        self.metadata.last_updated_at = _now()
        self._save()

    def finalize(self) -> None:
        self.metadata.status = STATUS_COMPLETED
        self._save()

    def mark_crashed(self, error: Optional[BaseException] = None) -> None:
        self.metadata.status = STATUS_CRASHED
        if error is not None:
            self.metadata.error = str(error)
        self._save()

    def _save(self) -> None:
        payload = {"metadata": self.metadata.to_dict(), "turns": self._turns}
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)


# ============================================================================
# READING
# ============================================================================

def load_replay(path: str | Path) -> Replay:
    """Load a replay file written by ReplayWriter."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return Replay(
        metadata=ReplayMetadata.from_dict(data["metadata"]),
        turns=[GameState.from_dict(turn) for turn in data.get("turns", [])],
    )


def load_replay_metadata(path: str | Path) -> ReplayMetadata:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return ReplayMetadata.from_dict(data["metadata"])


def list_replays(directory: str | Path = REPLAY_STORAGE_DIR) -> List[Tuple[Path, ReplayMetadata]]:
    """
    List readable replays in `directory`, newest first.

    Files that cannot be parsed are skipped with a warning.
    """
    directory = Path(directory)
    if not directory.exists():
        return []

    replays = []
    for path in directory.glob("*.json"):
        try:
            replays.append((path, load_replay_metadata(path)))
        except (OSError, ValueError, KeyError) as exc:
            log.warning("Skipping unreadable replay %s: %s", path.name, exc)

    replays.sort(key=lambda item: item[1].created_at, reverse=True)
    return replays


def check_compatibility(metadata: ReplayMetadata) -> Tuple[bool, Optional[str]]:
    """
    Compare a replay's engine version against this engine.

    Returns:
        (compatible, warning). A major version mismatch is incompatible; any
        other difference is compatible with a warning.
    """
    current = ENGINE_VERSION.split(".")
    received = metadata.engine_version.split(".")

    if current[0] != received[0]:
        return False, (
            f"Major version mismatch (engine {ENGINE_VERSION}, replay {metadata.engine_version}); "
            "playback may fail"
        )
    if current != received:
        return True, (
            f"Minor version mismatch (engine {ENGINE_VERSION}, replay {metadata.engine_version})"
        )
    return True, None
