"""Shared geometry helpers for entities moving inside the arena."""

from __future__ import annotations

import math

import pygame


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_to_arena(x: float, y: float, arena: pygame.Rect) -> tuple[float, float]:
    """Clamp a point to the closed arena rectangle ``[left, right] x [top, bottom]``."""
    return (
        clamp(x, arena.left, arena.right),
        clamp(y, arena.top, arena.bottom),
    )


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def sync_rect(sprite: pygame.sprite.Sprite) -> None:
    sprite.rect.center = (int(sprite.x), int(sprite.y))  # type: ignore[attr-defined]
