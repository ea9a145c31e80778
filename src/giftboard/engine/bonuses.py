from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from giftboard.core.events import BonusTriggeredEvent
from giftboard.core.palettes import GOLD_COLOR_INDEX

if TYPE_CHECKING:
    from giftboard.core.alerts import Alert
    from giftboard.core.state import BonusItem, PlayerState
    from giftboard.engine.game_engine import GameEngine


def _apply_effect(
    engine: GameEngine,
    player: PlayerState,
    bonus: BonusItem,
) -> tuple[str, str]:
    """Mutate player and bonus for the bonus kind. Returns the alert text."""
    track_length = engine.config.track_length
    match bonus.kind:
        case "Setback":
            player.tile_index = max(0, player.tile_index - 1)
            _ = engine.board.relocate(bonus, track_length)
            return "⛔️ OOPS!", f"{player.name} fell back 1 space!"
        case "RelocateReward":
            _ = engine.board.relocate(bonus, track_length)
            return "💎 LIVE POINTS!", "Found the stash!"
        case "Spin":
            bonus.claimed = True
            return "🎰 SPIN!", "Spin the wheel!"
        case "Shirt":
            bonus.claimed = True
            return "👕 SHIRT!", "Name on Shirt!"
        case "Gold":
            player.color_index = GOLD_COLOR_INDEX
            bonus.claimed = True
            return "👑 GOLD!", "Golden Status!"
        case "Custom":
            bonus.claimed = True
            return (
                f"✨ {bonus.custom_title or 'Mystery'}",
                bonus.custom_message or "Prize!",
            )
        case _:
            assert_never(bonus.kind)


def resolve_bonus(engine: GameEngine, player_id: int, tile_index: int) -> Alert | None:
    """
    Trigger the unclaimed bonus on `tile_index` for a player who just landed there.

    Disabled kinds are inert: no effect and no alert.
    """
    bonus = engine.board.unclaimed_at(tile_index)
    if bonus is None:
        return None
    if not engine.config.is_enabled(bonus.kind):
        engine.log_debug(f"Bonus: {bonus.repr} is disabled, ignoring")
        return None

    player = engine.get_player(player_id)
    if player is None:
        return None

    title, message = _apply_effect(engine, player, bonus)
    engine.log_info(f"Bonus: {player.repr} triggered {bonus.kind} on tile {tile_index}")

    alert = engine.post_alert(title, message)
    engine.publish(
        BonusTriggeredEvent(
            player_id=player.id,
            bonus_id=bonus.id,
            kind=bonus.kind,
            tile_idx=tile_index,
            new_tile_idx=bonus.tile_index,
            claimed=bonus.claimed,
        ),
    )
    return alert
