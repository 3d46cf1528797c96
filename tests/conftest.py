import random

import pytest

from zombie_shooter.entities_constants import CharacterType
from zombie_shooter.gameplay import initialize_game_state
from zombie_shooter.models import GameData


@pytest.fixture
def game_data() -> GameData:
    return initialize_game_state(CharacterType.BALANCED, rng=random.Random(0))
