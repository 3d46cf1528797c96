import math

import pytest

from zombie_shooter.entities import Zombie, ZombieReward
from zombie_shooter.entities_constants import ZombieType


def test_max_hp_scales_with_level() -> None:
    zombie = Zombie(ZombieType.NORMAL, 5, 0, 0)

    assert zombie.max_hp == 70
    assert zombie.current_hp == 70
    assert Zombie(ZombieType.BOSS, 10, 0, 0).max_hp == 300


def test_reward_depends_only_on_variant() -> None:
    weak = Zombie(ZombieType.FAST, 1, 0, 0)
    strong = Zombie(ZombieType.FAST, 12, 0, 0)
    strong.take_damage(5)

    assert weak.get_reward() == strong.get_reward() == ZombieReward(15, 8)


def test_take_damage_clamps_and_marks_dead() -> None:
    zombie = Zombie(ZombieType.NORMAL, 0, 0, 0)

    assert zombie.take_damage(-3) == 0
    assert zombie.take_damage(15) == 15
    assert zombie.is_dead is False
    assert zombie.take_damage(15) == 5
    assert zombie.current_hp == 0
    assert zombie.is_dead is True


def test_burn_deals_damage_until_expiry() -> None:
    zombie = Zombie(ZombieType.NORMAL, 5, 0, 0)
    zombie.apply_burn(10, 3.0, now=0.0)

    assert zombie.burning is True
    assert zombie.update_burn_effect(0.5, now=0.5) == 5
    assert zombie.current_hp == 65
    assert zombie.update_burn_effect(0.5, now=3.0) == 0
    assert zombie.burning is False
    assert zombie.update_burn_effect(0.5, now=3.5) == 0
    assert zombie.current_hp == 65


def test_burn_floors_damage_on_every_tick() -> None:
    zombie = Zombie(ZombieType.NORMAL, 5, 0, 0)
    zombie.apply_burn(3, 10.0, now=0.0)

    assert zombie.update_burn_effect(0.5, now=0.5) == 1
    assert zombie.update_burn_effect(0.5, now=1.0) == 1
    assert zombie.current_hp == 68
    assert zombie.update_burn_effect(1 / 60, now=1.1) == 0


def test_reapplying_burn_overwrites_previous_effect() -> None:
    zombie = Zombie(ZombieType.STRONG, 0, 0, 0)
    zombie.apply_burn(10, 3.0, now=0.0)
    zombie.apply_burn(4, 1.0, now=2.0)

    assert zombie.burn_damage_per_second == 4
    assert zombie.burn_expires_at == 3.0
    assert zombie.update_burn_effect(1.0, now=2.5) == 4
    assert zombie.update_burn_effect(1.0, now=3.0) == 0


def test_move_towards_player_uses_frame_scaled_speed() -> None:
    zombie = Zombie(ZombieType.NORMAL, 1, 100, 100)
    assert zombie.rect.center == (100, 100)

    zombie.move_towards_player(200, 100, 1 / 60)
    assert zombie.x == pytest.approx(101.5)
    assert zombie.y == pytest.approx(100)

    zombie.move_towards_player(zombie.x, 400, 1.0)
    assert zombie.y == pytest.approx(190)


def test_move_towards_player_is_noop_on_same_position() -> None:
    zombie = Zombie(ZombieType.FAST, 1, 300, 300)

    zombie.move_towards_player(300, 300, 1.0)

    assert (zombie.x, zombie.y) == (300, 300)


def test_move_towards_player_clamps_to_arena() -> None:
    zombie = Zombie(ZombieType.FAST, 1, 10, 500)

    zombie.move_towards_player(-1000, 500, 1.0)

    assert zombie.x == 0
    assert zombie.y == pytest.approx(500)


def test_player_collision_threshold() -> None:
    zombie = Zombie(ZombieType.NORMAL, 1, 0, 0)

    assert zombie.is_colliding_with_player(30, 40) is False  # exactly 50
    assert zombie.is_colliding_with_player(30, 39) is True


def test_angle_to_player() -> None:
    zombie = Zombie(ZombieType.NORMAL, 1, 0, 0)

    assert zombie.get_angle_to_player(0, 100) == pytest.approx(math.pi / 2)
    assert zombie.get_angle_to_player(-100, 0) == pytest.approx(math.pi)


def test_contact_attacks_respect_interval() -> None:
    zombie = Zombie(ZombieType.TANK, 1, 0, 0)

    assert zombie.try_attack(0.0) == 15
    assert zombie.try_attack(0.5) == 0
    assert zombie.try_attack(1.0) == 15
