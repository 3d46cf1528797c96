from __future__ import annotations

import logging

import pygame

from ..entities import Player
from ..entities_constants import CharacterType
from ..models import GameData, GameState, Groups, ProgressState
from ..rng import RandomSource, get_rng
from ..tuning import DEFAULT_TUNING, Tuning

logger = logging.getLogger(__name__)


def initialize_game_state(
    character_type: CharacterType,
    *,
    tuning: Tuning = DEFAULT_TUNING,
    rng: RandomSource | None = None,
) -> GameData:
    """Initialize and return the base game state for a fresh player."""
    game_data = GameData(
        state=ProgressState(status=GameState.PLAYING),
        groups=Groups(zombie_group=pygame.sprite.Group()),
        player=Player(character_type, tuning=tuning),
        tuning=tuning,
        rng=get_rng() if rng is None else rng,
        arena=pygame.Rect(0, 0, tuning.arena_width, tuning.arena_height),
    )
    logger.info("New game as %s", character_type.name)
    return game_data


def start_session(game_data: GameData) -> None:
    """Begin a new round; gold and owned weapons persist, everything else resets."""
    game_data.player.reset()
    game_data.player.set_position(game_data.arena.centerx, game_data.arena.centery)
    game_data.groups.zombie_group.empty()
    game_data.projectiles.clear()
    game_data.explosions.clear()
    game_data.state = ProgressState(status=GameState.PLAYING)


def pause_game(game_data: GameData) -> bool:
    if game_data.state.status != GameState.PLAYING:
        return False
    game_data.state.status = GameState.PAUSED
    return True


def resume_game(game_data: GameData) -> bool:
    if game_data.state.status != GameState.PAUSED:
        return False
    game_data.state.status = GameState.PLAYING
    return True


def mark_game_over(game_data: GameData) -> None:
    state = game_data.state
    if state.status == GameState.GAME_OVER:
        return
    state.status = GameState.GAME_OVER
    state.game_over_at = state.elapsed
    logger.info(
        "Game over at %.1fs: score %d, level %d, %d kills",
        state.elapsed,
        game_data.player.score,
        game_data.player.level,
        state.zombies_killed,
    )


__all__ = [
    "initialize_game_state",
    "start_session",
    "pause_game",
    "resume_game",
    "mark_game_over",
]
