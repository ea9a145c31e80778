from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from giftboard.core import LOGGER_NAME
from giftboard.core.errors import ValidationError
from giftboard.core.palettes import MAX_RANDOM_COLOR_INDEX
from giftboard.core.state import PlayerState

if TYPE_CHECKING:
    import random
    from collections.abc import Iterator

    from giftboard.core.state import GameState

logger = logging.getLogger(LOGGER_NAME)

NAME_LENGTH = 4


def normalize_name(source_name: str) -> str:
    """Player key for a source identity: first four characters, upper-cased."""
    if not source_name or not source_name.strip():
        msg = "Player name must not be empty."
        raise ValidationError(msg)
    return source_name[:NAME_LENGTH].upper()


class PlayerRegistry:
    """Lookup and lifecycle of the players held in a GameState."""

    def __init__(self, state: GameState, rng: random.Random) -> None:
        self.state = state
        self.rng = rng

    def __iter__(self) -> Iterator[PlayerState]:
        return iter(self.state.players)

    def __len__(self) -> int:
        return len(self.state.players)

    def get(self, player_id: int) -> PlayerState | None:
        return next((p for p in self.state.players if p.id == player_id), None)

    def find_by_name(self, name: str) -> PlayerState | None:
        return next((p for p in self.state.players if p.name == name), None)

    def create(self, source_name: str) -> PlayerState:
        name = normalize_name(source_name)
        player = PlayerState(
            id=self.state.allocate_player_id(),
            name=name,
            color_index=self.rng.randint(0, MAX_RANDOM_COLOR_INDEX),
        )
        self.state.players.append(player)
        logger.info(f"REGISTRY: Added {player.repr} (color={player.color_index})")
        return player

    def remove(self, player_id: int) -> PlayerState | None:
        player = self.get(player_id)
        if player is None:
            logger.warning(f"REGISTRY: Failed to remove player {player_id} - not found.")
            return None
        self.state.players.remove(player)
        logger.info(f"REGISTRY: Removed {player.repr}")
        return player

    def clear(self) -> None:
        self.state.players.clear()
