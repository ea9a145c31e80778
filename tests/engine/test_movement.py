from giftboard.core.events import PlayerFinishedEvent, PlayerMovedEvent
from tests.test_utils import GameScenario, PlayerConfig


def test_manual_forward_step(scenario: type[GameScenario]):
    game = scenario([PlayerConfig("ANNA", tile=3)], bonuses=[])

    assert game.move("ANNA", 1) is True
    assert game.get_player("ANNA").tile_index == 4
    assert game.store.save_count == 1


def test_backward_move_onto_bonus_does_not_trigger(scenario: type[GameScenario]):
    """
    Scenario: Spin bonus on tile 5, player on tile 6 steps back.
    Expected: Player lands on 5, the bonus stays unclaimed, no alert.
    """
    game = scenario([PlayerConfig("BEN", tile=6)], bonuses=[(5, "Spin")])

    assert game.move("BEN", -1) is True

    assert game.get_player("BEN").tile_index == 5
    bonus = game.bonus_at(5)
    assert bonus is not None
    assert bonus.claimed is False
    assert game.engine.alerts.peek() is None


def test_forward_move_onto_bonus_triggers(scenario: type[GameScenario]):
    game = scenario([PlayerConfig("BEN", tile=4)], bonuses=[(5, "Spin")])

    _ = game.move("BEN", 1)

    assert game.bonus_at(5) is None
    assert game.engine.alerts.peek() is not None


def test_gift_move_only_resolves_the_landing_tile(scenario: type[GameScenario]):
    game = scenario(bonuses=[(2, "Spin"), (3, "Shirt")])

    _ = game.gift("cleo", coins=3000)

    assert game.get_player("CLEO").tile_index == 3
    assert game.bonus_at(2) is not None  # passed over
    assert game.bonus_at(3) is None  # landed on


def test_backward_move_off_the_start_is_discarded(scenario: type[GameScenario]):
    game = scenario([PlayerConfig("DAN", tile=0)], bonuses=[])

    assert game.move("DAN", -1) is False

    assert game.get_player("DAN").tile_index == 0
    assert game.store.save_count == 0


def test_forward_move_past_the_finish_is_discarded(scenario: type[GameScenario]):
    """No clamping: 27 + 5 = 32 is off a 30-tile track, so nothing happens."""
    game = scenario([PlayerConfig("EVE", tile=27)], bonuses=[])

    assert game.move("EVE", 5) is False
    assert game.get_player("EVE").tile_index == 27


def test_zero_step_and_unknown_player_are_ignored(scenario: type[GameScenario]):
    game = scenario([PlayerConfig("FAY", tile=2)], bonuses=[])

    assert game.engine.manual_move(game.get_player("FAY").id, 0) is False
    assert game.engine.manual_move(999, 1) is False
    assert game.store.save_count == 0


def test_reaching_last_tile_wins_grand_prize(scenario: type[GameScenario]):
    """
    Scenario: Player on tile 28 of 30 moves forward 1.
    Expected: Lands on tile 29, finish rank 1, grand prize alert.
    """
    game = scenario([PlayerConfig("GUS", tile=28)], bonuses=[])
    game.record(PlayerFinishedEvent)

    _ = game.move("GUS", 1)

    gus = game.get_player("GUS")
    assert gus.tile_index == 29
    assert gus.finish_rank == 1
    assert game.engine.state.win_count == 1

    alert = game.engine.alerts.peek()
    assert alert is not None
    assert "GRAND PRIZE" in alert.title
    assert "GUS" in alert.message
    assert game.events == [PlayerFinishedEvent(player_id=gus.id, finish_rank=1)]


def test_finished_player_never_moves_again(scenario: type[GameScenario]):
    game = scenario([PlayerConfig("HAL", tile=28)], bonuses=[])
    _ = game.move("HAL", 1)

    assert game.move("HAL", -1) is False
    assert game.move("HAL", 1) is False

    hal = game.get_player("HAL")
    assert hal.tile_index == 29
    assert hal.finish_rank == 1


def test_finish_ranks_are_consecutive(scenario: type[GameScenario]):
    names = ["IDA", "JON", "KIM", "LEO", "MAX"]
    game = scenario([PlayerConfig(name, tile=28) for name in names], bonuses=[])

    titles = []
    for name in names:
        _ = game.move(name, 1)
        titles.append(game.engine.alerts.consume().title)

    assert [game.get_player(n).finish_rank for n in names] == [1, 2, 3, 4, 5]
    assert "GRAND PRIZE" in titles[0]
    assert "2ND PLACE" in titles[1]
    assert "3RD PLACE" in titles[2]
    assert "FINISHER" in titles[3]
    assert "FINISHER" in titles[4]


def test_gift_can_finish_a_player(scenario: type[GameScenario]):
    game = scenario([PlayerConfig("NED", tile=26)], bonuses=[])

    _ = game.gift("ned", coins=3000)

    ned = game.get_player("NED")
    assert ned.tile_index == 29
    assert ned.finish_rank == 1


def test_move_publishes_moved_event(scenario: type[GameScenario]):
    game = scenario([PlayerConfig("OLA", tile=10)], bonuses=[])
    game.record(PlayerMovedEvent)

    _ = game.move("OLA", -1)

    ola = game.get_player("OLA")
    assert game.events == [
        PlayerMovedEvent(player_id=ola.id, start_tile=10, end_tile=9, source="Manual"),
    ]


def test_finish_needs_the_player_to_stay_on_the_final_tile(
    scenario: type[GameScenario],
):
    """
    Scenario: A setback sits on the final tile and the player steps onto it.
    Expected: Pushed back to 28, so no rank is handed out.
    """
    game = scenario([PlayerConfig("LUKE", tile=28)], bonuses=[(29, "Setback")])

    _ = game.move("LUKE", 1)

    player = game.get_player("LUKE")
    assert player.tile_index == 28
    assert player.finish_rank is None
    assert game.engine.state.win_count == 0
