from __future__ import annotations

from typing import TYPE_CHECKING

from giftboard.core.events import PlayerMovedEvent
from giftboard.engine.bonuses import resolve_bonus
from giftboard.engine.ranking import handle_finish

if TYPE_CHECKING:
    from giftboard.engine.game_engine import GameEngine


def move(engine: GameEngine, player_id: int, step: int, source: str = "Manual") -> bool:
    """
    Move a player `step` tiles and resolve whatever the landing tile holds.

    Returns False when the move was discarded: unknown or finished player, a
    zero step, or a target outside the track. Out-of-range moves are dropped
    whole, never clamped.
    """
    player = engine.get_player(player_id)
    if player is None:
        engine.log_warning(f"Move: player {player_id} not found ({source})")
        return False
    if player.finished:
        engine.log_debug(f"Move: {player.repr} already finished, ignoring ({source})")
        return False
    if step == 0:
        return False

    start = player.tile_index
    target = start + step
    if not 0 <= target < engine.config.track_length:
        engine.log_debug(
            f"Move: {player.repr} {start}->{target} is off the track, discarded ({source})",
        )
        return False

    player.tile_index = target
    engine.log_info(f"Move: {player.repr} {start}->{target} ({source})")
    engine.publish(
        PlayerMovedEvent(
            player_id=player.id,
            start_tile=start,
            end_tile=target,
            source=source,
        ),
    )

    # Only forward progress earns bonuses
    if step > 0:
        _ = resolve_bonus(engine, player.id, target)

    # A setback may have pushed the player off the landing tile
    if player.tile_index == engine.config.final_tile:
        handle_finish(engine, player)

    return True
