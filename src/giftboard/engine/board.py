from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from giftboard.core import LOGGER_NAME
from giftboard.core.errors import ConfigurationError
from giftboard.core.state import BonusItem

if TYPE_CHECKING:
    import random
    from collections.abc import Iterator

    from giftboard.config import GameConfig
    from giftboard.core.state import GameState
    from giftboard.core.types import BonusKind

logger = logging.getLogger(LOGGER_NAME)

DEFAULT_BONUS_LAYOUT: tuple[tuple[int, BonusKind], ...] = (
    (6, "Setback"),
    (11, "Spin"),
    (17, "Shirt"),
    (19, "Gold"),
    (24, "RelocateReward"),
    (8, "RelocateReward"),
)


def min_track_length() -> int:
    """Shortest track the default layout fits on, final tile excluded."""
    return max(tile for tile, _ in DEFAULT_BONUS_LAYOUT) + 2


class BonusCatalog:
    """Bonus tiles on the track and their claim state."""

    def __init__(self, state: GameState, rng: random.Random) -> None:
        self.state = state
        self.rng = rng

    def __iter__(self) -> Iterator[BonusItem]:
        return iter(self.state.bonuses)

    def __len__(self) -> int:
        return len(self.state.bonuses)

    def add(
        self,
        tile_index: int,
        kind: BonusKind,
        *,
        custom_title: str | None = None,
        custom_message: str | None = None,
    ) -> BonusItem:
        bonus = BonusItem(
            id=self.state.allocate_bonus_id(),
            tile_index=tile_index,
            kind=kind,
            custom_title=custom_title,
            custom_message=custom_message,
        )
        self.state.bonuses.append(bonus)
        logger.info(f"BOARD: Registered {bonus.repr}")
        return bonus

    def clear(self) -> None:
        self.state.bonuses.clear()

    def unclaimed_at(self, tile: int) -> BonusItem | None:
        return next(
            (b for b in self.state.bonuses if b.tile_index == tile and not b.claimed),
            None,
        )

    def setup_defaults(self) -> bool:
        """Create the default bonus set if the board has none."""
        if self.state.bonuses:
            return False
        for tile, kind in DEFAULT_BONUS_LAYOUT:
            _ = self.add(tile, kind)
        return True

    def apply_custom_tile(self, config: GameConfig) -> BonusItem | None:
        """Replace any Custom bonus with one matching the current settings."""
        before = len(self.state.bonuses)
        self.state.bonuses[:] = [b for b in self.state.bonuses if b.kind != "Custom"]
        if len(self.state.bonuses) != before:
            logger.info("BOARD: Removed custom tile")

        if not config.enable_custom:
            return None
        return self.add(
            config.custom_tile_index,
            "Custom",
            custom_title=config.custom_title,
            custom_message=config.custom_message,
        )

    def _sample_free_tile(self, occupied: set[int], track_length: int) -> int:
        candidates = sorted(set(range(1, track_length - 1)) - occupied)
        if not candidates:
            msg = (
                f"No free tile left on a {track_length}-tile track "
                f"({len(occupied)} tiles occupied)."
            )
            raise ConfigurationError(msg)
        return self.rng.choice(candidates)

    def relocate(self, bonus: BonusItem, track_length: int) -> int:
        """
        Move a recurring bonus to a random inner tile.

        The new tile is never the final tile, never tile 0, and never a tile
        held by an unclaimed bonus, the bonus's own current tile included.
        """
        occupied = {b.tile_index for b in self.state.bonuses if not b.claimed}
        new_tile = self._sample_free_tile(occupied, track_length)
        logger.info(f"BOARD: Relocated {bonus.repr} -> {new_tile}")
        bonus.tile_index = new_tile
        return new_tile

    def randomize(self, track_length: int) -> None:
        """Give every bonus a fresh inner tile no other bonus holds."""
        if len(self.state.bonuses) > track_length - 2:
            msg = (
                f"{len(self.state.bonuses)} bonuses do not fit on the "
                f"{track_length - 2} inner tiles."
            )
            raise ConfigurationError(msg)
        for bonus in self.state.bonuses:
            occupied = {
                b.tile_index for b in self.state.bonuses if b.id != bonus.id
            }
            bonus.tile_index = self._sample_free_tile(occupied, track_length)
        self.dump_state()

    def dump_state(self) -> None:
        """Log the location of every bonus on the board."""
        logger.debug("=== BOARD STATE DUMP ===")
        if not self.state.bonuses:
            logger.debug("  (Board has no bonuses)")
            return
        for bonus in sorted(self.state.bonuses, key=lambda b: b.tile_index):
            status = "claimed" if bonus.claimed else "open"
            logger.debug(f"  Tile {bonus.tile_index:02d}: {bonus.kind} ({status})")
        logger.debug("========================")
