from dataclasses import dataclass, field

from giftboard.core.types import BonusKind


@dataclass(slots=True)
class PlayerState:
    id: int
    name: str
    tile_index: int = 0
    color_index: int = 0
    finish_rank: int | None = None
    lifetime_coins: int = 0
    spendable_coins: int = 0

    @property
    def repr(self) -> str:
        return f"{self.id}:{self.name}"

    @property
    def finished(self) -> bool:
        return self.finish_rank is not None


@dataclass(slots=True)
class BonusItem:
    id: int
    tile_index: int
    kind: BonusKind
    claimed: bool = False
    # Only set for the Custom kind
    custom_title: str | None = None
    custom_message: str | None = None

    @property
    def repr(self) -> str:
        return f"{self.kind}#{self.id}@{self.tile_index}"


@dataclass(slots=True)
class GameState:
    """Everything the engine owns. This is also the persisted snapshot."""

    players: list[PlayerState] = field(default_factory=list)
    bonuses: list[BonusItem] = field(default_factory=list)
    win_count: int = 0
    next_player_id: int = 1
    next_bonus_id: int = 1

    def allocate_player_id(self) -> int:
        player_id = self.next_player_id
        self.next_player_id += 1
        return player_id

    def allocate_bonus_id(self) -> int:
        bonus_id = self.next_bonus_id
        self.next_bonus_id += 1
        return bonus_id


@dataclass(slots=True)
class LogContext:
    """Per-engine logging state."""

    operation_count: int = 0
    operation_log_count: int = 0
    current_player_repr: str = "_"

    def start_operation(self, player_repr: str = "_"):
        self.operation_count += 1
        self.operation_log_count = 0
        self.current_player_repr = player_repr

    def set_player(self, player_repr: str):
        self.current_player_repr = player_repr

    def inc_log_count(self):
        self.operation_log_count += 1
