from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
import random
from typing import Any, Dict, List, Optional, Sequence

from agents import AgentSpec, available_agents, collect_actions, create_population
from gridlife import GameConfig, GameState, TurnEngine, create_initial_state, record_decisions
from gridlife.replay import ReplayWriter
from infra.logger import configure_logging, get_logger
from infra.paths import LOG_DIR, REPLAY_STORAGE_DIR

log = get_logger(__name__)

DEFAULT_NAMES = ["Ada", "Bo", "Cy", "Dee", "Eli", "Fay", "Gus", "Hal"]


@dataclass
class EpisodeResult:
    state: GameState
    turns_played: int
    survivors: List[str]
    replay_path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.to_dict(),
            "turns_played": self.turns_played,
            "survivors": self.survivors,
            "replay_path": str(self.replay_path) if self.replay_path else None,
        }


class GameRunner:
    """
    Barebones game runner: build a world from agent specs and play until everyone is dead.
    """

    def __init__(
        self,
        config: GameConfig | Dict[str, Any] | None,
        specs: Sequence[AgentSpec],
        seed: Optional[int] = None,
        replay_dir: str | Path | None = None,
    ):
        self.config = config
        self.specs = list(specs)
        self.rng = random.Random(seed)
        self.replay_dir = replay_dir
        self.engine = TurnEngine()

    def run_episode(self, max_turns: int = 200) -> EpisodeResult:
        policies = create_population(self.specs)
        state = create_initial_state(self.config, [spec.identity for spec in self.specs], self.rng)

        writer: Optional[ReplayWriter] = None
        if self.replay_dir is not None:
            writer = ReplayWriter(state.config, self.replay_dir)
            writer.initialize(state)

        turns = 0
        try:
            while turns < max_turns and any(agent.alive for agent in state.agents.values()):
                actions = collect_actions(state, policies)
                state = record_decisions(state, actions)
                state = self.engine.step(state, actions, self.rng).state
                turns += 1
                if writer is not None:
                    writer.append_turn(state)
        except Exception as exc:
            if writer is not None:
                writer.mark_crashed(exc)
            log.exception("Episode crashed at turn %d", state.turn)
            raise

        if writer is not None:
            writer.finalize()

        survivors = [agent.id for agent in state.living_agents()]
        log.info("Episode finished after %d turn(s); survivors: %s", turns, survivors or "none")
        return EpisodeResult(
            state=state,
            turns_played=turns,
            survivors=survivors,
            replay_path=writer.path if writer is not None else None,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a gridlife simulation")
    parser.add_argument("-a", "--agents", type=int, default=4, help="Number of agents")
    parser.add_argument(
        "-p", "--policy", default="random", choices=available_agents(), help="Policy for every agent"
    )
    parser.add_argument("-W", "--width", type=int, default=20, help="Grid width")
    parser.add_argument("-H", "--height", type=int, default=20, help="Grid height")
    parser.add_argument("-t", "--max-turns", type=int, default=200, help="Stop after this many turns")
    parser.add_argument("-s", "--seed", type=int, default=None, help="Seed for world and tie-breaks")
    parser.add_argument(
        "-o", "--output", default=str(REPLAY_STORAGE_DIR), help="Directory for replay files"
    )
    parser.add_argument("--no-replay", action="store_true", help="Do not write a replay file")
    parser.add_argument("--log-level", default="INFO", help="Root logging level")
    parser.add_argument("--engine-log-level", default="WARNING", help="Level for gridlife.* loggers")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    parser.add_argument("--log-file", default=str(LOG_DIR / "gridlife.log"), help="Log file path")
    parser.add_argument("--no-log-file", action="store_true", help="Log to stdout only")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> EpisodeResult:
    args = build_parser().parse_args(argv)
    configure_logging(
        args.log_level,
        json=args.json_logs,
        logfile=None if args.no_log_file else args.log_file,
        engine_level=args.engine_log_level,
    )

    names = [DEFAULT_NAMES[i % len(DEFAULT_NAMES)] for i in range(args.agents)]
    base_seed = args.seed if args.seed is not None else random.randrange(2**31)
    specs = [
        AgentSpec(type=args.policy, agent_id=f"agent-{i}", name=name, init_params={"seed": base_seed + i})
        for i, name in enumerate(names)
    ]

    runner = GameRunner(
        {"grid_width": args.width, "grid_height": args.height},
        specs,
        seed=base_seed,
        replay_dir=None if args.no_replay else args.output,
    )
    result = runner.run_episode(max_turns=args.max_turns)
    print(result.state)
    if result.replay_path:
        print(f"Replay saved: {result.replay_path}")
    return result


if __name__ == "__main__":
    main()
