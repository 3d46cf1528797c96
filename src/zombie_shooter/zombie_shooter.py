from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from .__about__ import __version__
from .config import (
    configured_character,
    configured_log_level,
    load_config,
    save_config,
)
from .entities_constants import CharacterType
from .gameplay import (
    fire_weapon,
    initialize_game_state,
    move_player,
    player_stats,
    update_world,
)
from .gameplay_constants import FPS
from .models import GameData, GameState
from .rng import get_rng, seed_rng
from .tuning import tuning_from_config

logger = logging.getLogger("zombie_shooter")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="zombie-shooter",
        description="Run a headless zombie-shooter session with an autopilot.",
    )
    parser.add_argument(
        "--character",
        choices=[c.value for c in CharacterType],
        help="character type (defaults to the config value)",
    )
    parser.add_argument("--seconds", type=float, default=60.0)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)
    return parser.parse_args(argv)


def _autopilot(game_data: GameData) -> None:
    """Shoot at the nearest zombie and sidestep anything in contact range."""
    player = game_data.player
    nearest = None
    nearest_dist_sq = float("inf")
    for zombie in game_data.groups.zombie_group:
        dx = zombie.x - player.x
        dy = zombie.y - player.y
        dist_sq = dx * dx + dy * dy
        if dist_sq < nearest_dist_sq:
            nearest, nearest_dist_sq = zombie, dist_sq
    if nearest is None:
        return
    fire_weapon(game_data, nearest.x, nearest.y)
    danger = game_data.tuning.collision_distance * 2
    if nearest_dist_sq < danger * danger:
        move_player(game_data, "left" if nearest.x > player.x else "right")
        move_player(game_data, "up" if nearest.y > player.y else "down")


def run_session(game_data: GameData, seconds: float, fps: int) -> int:
    """Run until the time budget is used or the player dies; return kills."""
    delta_time = 1.0 / max(1, fps)
    kills = 0
    ticks = int(seconds * max(1, fps))
    for _ in range(ticks):
        _autopilot(game_data)
        result = update_world(game_data, delta_time)
        kills += result.zombies_removed
        if game_data.state.status == GameState.GAME_OVER:
            break
    return kills


# --- Main Entry Point ---
def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    config: dict[str, Any]
    config, config_path = load_config(args.config)
    if not config_path.exists():
        save_config(config, config_path)

    logging.basicConfig(
        level=configured_log_level(config, verbose=args.verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seed = seed_rng(args.seed)
    logger.debug("RNG seed %d", seed)
    tuning = tuning_from_config(config)
    if args.character:
        character = CharacterType(args.character)
    else:
        character = configured_character(config)

    game_data = initialize_game_state(character, tuning=tuning, rng=get_rng())
    kills = run_session(game_data, args.seconds, args.fps)

    stats = player_stats(game_data)
    weapon_name = stats.weapon.name if stats.weapon else "-"
    print(
        f"{character.name}: {game_data.state.elapsed:.1f}s survived, "
        f"HP {stats.hp}/{stats.max_hp}, score {stats.score}, level {stats.level}, "
        f"gold {stats.gold}, kills {kills}, weapon {weapon_name}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
