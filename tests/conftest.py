import pytest

from tests.test_utils import GameScenario


@pytest.fixture
def scenario():
    """Factory fixture to create scenarios."""

    def _builder(players_config=None, rolls=None, config=None, bonuses=None):
        return GameScenario(players_config, rolls, config=config, bonuses=bonuses)

    return _builder
