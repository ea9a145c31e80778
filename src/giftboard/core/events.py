from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from giftboard.core.types import BonusKind, StateChangeReason


class GameEvent:
    pass


@dataclass(frozen=True)
class PlayerJoinedEvent(GameEvent):
    player_id: int
    name: str


@dataclass(frozen=True)
class GiftProcessedEvent(GameEvent):
    player_id: int
    coins: int
    moves: int


@dataclass(frozen=True)
class PlayerMovedEvent(GameEvent):
    player_id: int
    start_tile: int
    end_tile: int
    source: str


@dataclass(frozen=True)
class BonusTriggeredEvent(GameEvent):
    player_id: int
    bonus_id: int
    kind: BonusKind
    tile_idx: int
    # Where the bonus ended up after resolving; differs from tile_idx for recurring kinds
    new_tile_idx: int
    claimed: bool


@dataclass(frozen=True)
class PlayerFinishedEvent(GameEvent):
    player_id: int
    finish_rank: int  # 1st, 2nd, etc.


@dataclass(frozen=True)
class StateChangedEvent(GameEvent):
    reason: StateChangeReason
