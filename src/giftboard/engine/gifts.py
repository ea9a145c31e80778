from __future__ import annotations

from typing import TYPE_CHECKING

from giftboard.core.errors import ValidationError
from giftboard.core.events import GiftProcessedEvent
from giftboard.core.registry import normalize_name
from giftboard.engine.movement import move

if TYPE_CHECKING:
    from giftboard.core.state import PlayerState
    from giftboard.engine.game_engine import GameEngine
    from giftboard.stream import GiftEvent


def validate_gift(event: GiftEvent) -> str:
    """Check a gift event and return the player key it maps to."""
    if event.gift_count < 1:
        msg = f"gift_count must be at least 1, got {event.gift_count}."
        raise ValidationError(msg)
    if event.coins_per_gift < 0:
        msg = f"coins_per_gift must not be negative, got {event.coins_per_gift}."
        raise ValidationError(msg)
    return normalize_name(event.source_name)


def process_gift(engine: GameEngine, event: GiftEvent) -> PlayerState:
    """
    Credit a gift to its sender and convert whole coin chunks into movement.

    Coins are converted even when the resulting move is discarded, so the
    spendable balance always ends below the cost of one move.
    """
    key = validate_gift(event)

    player = engine.players.find_by_name(key)
    if player is None:
        player = engine.add_player_state(event.source_name)

    engine.log_context.set_player(player.repr)

    gained = event.coins_per_gift * event.gift_count
    player.lifetime_coins += gained
    player.spendable_coins += gained

    cost = engine.config.cost_per_move
    moves = player.spendable_coins // cost
    engine.log_info(
        f"Gift: {player.repr} +{gained} coins "
        f"(lifetime={player.lifetime_coins}, spendable={player.spendable_coins})",
    )
    engine.publish(GiftProcessedEvent(player_id=player.id, coins=gained, moves=moves))

    if moves >= 1:
        player.spendable_coins -= moves * cost
        _ = move(engine, player.id, moves, source="Gift")

    return player
