import dataclasses
import importlib

import pytest

from giftboard.core.events import BonusTriggeredEvent, StateChangedEvent


@pytest.mark.parametrize(
    "module",
    [
        "giftboard.core.events",
        "giftboard.engine.logging",
        "giftboard.engine.game_engine",
        "giftboard.__main__",
    ],
)
def test_modules_import_cleanly(module):
    assert importlib.import_module(module) is not None


def test_events_are_frozen():
    event = BonusTriggeredEvent(
        player_id=1,
        bonus_id=4,
        kind="Setback",
        tile_idx=6,
        new_tile_idx=13,
        claimed=False,
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        event.claimed = True  # pyright: ignore[reportAttributeAccessIssue]


def test_state_change_carries_reason():
    assert StateChangedEvent(reason="reset").reason == "reset"
