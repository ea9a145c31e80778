from __future__ import annotations

from typing import TYPE_CHECKING

from giftboard.core.events import PlayerFinishedEvent

if TYPE_CHECKING:
    from collections.abc import Iterable

    from giftboard.core.alerts import Alert
    from giftboard.core.state import PlayerState
    from giftboard.engine.game_engine import GameEngine


def finish_alert_text(rank: int, name: str) -> tuple[str, str]:
    match rank:
        case 1:
            return "🏆 GRAND PRIZE WINNER!", f"{name} has won the Grand Prize!"
        case 2:
            return "🥈 2ND PLACE WINNER!", f"{name} has won the 2nd Place Prize!"
        case 3:
            return "🥉 3RD PLACE WINNER!", f"{name} has won the 3rd Place Prize!"
        case _:
            return "🎉 FINISHER!", f"{name} finished #{rank}!"


def handle_finish(engine: GameEngine, player: PlayerState) -> Alert | None:
    """Assign the next finish rank to a player standing on the final tile."""
    if player.finished:
        return None

    engine.state.win_count += 1
    player.finish_rank = engine.state.win_count
    engine.log_info(f"!!! {player.repr} FINISHED rank {player.finish_rank} !!!")

    title, message = finish_alert_text(player.finish_rank, player.name)
    alert = engine.post_alert(title, message)
    engine.publish(
        PlayerFinishedEvent(player_id=player.id, finish_rank=player.finish_rank),
    )
    return alert


def standing_key(player: PlayerState) -> tuple[bool, int, int, int]:
    """Sort key: finishers by rank, then the rest by tile, then lifetime coins."""
    if player.finish_rank is not None:
        return (False, player.finish_rank, 0, -player.lifetime_coins)
    return (True, 0, -player.tile_index, -player.lifetime_coins)


def standings(players: Iterable[PlayerState]) -> list[PlayerState]:
    """Leaderboard order. Pure; recompute whenever it is needed."""
    return sorted(players, key=standing_key)
