import json
from pathlib import Path

from zombie_shooter import zombie_shooter
from zombie_shooter.entities_constants import ZombieType
from zombie_shooter.gameplay import create_specific_zombie


def test_main_runs_headless_session(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.json"

    code = zombie_shooter.main(
        ["--seconds", "3", "--seed", "11", "--config", str(config_path)]
    )

    assert code == 0
    assert config_path.exists()
    saved = json.loads(config_path.read_text(encoding="utf-8"))
    assert saved["character"] == "balanced"
    out = capsys.readouterr().out
    assert "BALANCED:" in out
    assert "weapon AK47" in out


def test_main_uses_character_from_config(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"character": "tank"}), encoding="utf-8")

    zombie_shooter.main(["--seconds", "1", "--config", str(config_path)])

    assert "TANK:" in capsys.readouterr().out


def test_run_session_stops_on_game_over(game_data) -> None:
    player = game_data.player
    player.take_damage(player.max_hp - 1)
    game_data.groups.zombie_group.add(
        create_specific_zombie(ZombieType.BOSS, 1, player.x, player.y)
    )

    zombie_shooter.run_session(game_data, seconds=10.0, fps=60)

    assert game_data.state.game_over_at is not None
    assert game_data.state.elapsed < 1.0
