from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from giftboard.core import LOGGER_NAME
from giftboard.core.alerts import Alert, AlertSlot
from giftboard.core.errors import ConfigurationError
from giftboard.core.events import (
    GameEvent,
    PlayerJoinedEvent,
    StateChangedEvent,
)
from giftboard.core.registry import PlayerRegistry
from giftboard.core.state import GameState, LogContext
from giftboard.engine.board import BonusCatalog
from giftboard.engine.gifts import process_gift
from giftboard.engine.logging import ContextFilter
from giftboard.engine.movement import move
from giftboard.engine.ranking import standings
from giftboard.storage import copy_state
from giftboard.stream import decode_gift_event

if TYPE_CHECKING:
    from giftboard.config import GameConfig
    from giftboard.core.state import PlayerState
    from giftboard.core.types import StateChangeReason
    from giftboard.storage import SnapshotStore
    from giftboard.stream import GiftEvent


EventCallback = Callable[[GameEvent, "GameEngine"], None]


def check_track_bounds(state: GameState, config: GameConfig) -> None:
    """
    Reject a config whose track is too short for the pieces already on it.

    Unfinished players must stay short of the final tile, since only moving
    onto it ranks them. Every bonus except the custom tile, which is re-placed
    from the config anyway, must stay on an inner tile.
    """
    for player in state.players:
        limit = config.track_length if player.finished else config.final_tile
        if player.tile_index >= limit:
            msg = (
                f"{player.repr} on tile {player.tile_index} does not fit "
                f"a {config.track_length}-tile track."
            )
            raise ConfigurationError(msg)

    for bonus in state.bonuses:
        if bonus.kind != "Custom" and bonus.tile_index >= config.final_tile:
            msg = (
                f"{bonus.repr} would sit on or past the final tile "
                f"of a {config.track_length}-tile track."
            )
            raise ConfigurationError(msg)


@dataclass
class Subscriber:
    callback: EventCallback


@dataclass
class GameEngine:
    """
    Owns the players, the bonus board and the win counter.

    Every public mutating call runs to completion, chained movement, bonus and
    finish effects included, then persists a snapshot and publishes a
    StateChangedEvent. The engine does no locking: callers feeding it from
    several threads must serialize their calls.
    """

    config: GameConfig
    rng: random.Random = field(default_factory=random.Random)
    state: GameState = field(default_factory=GameState)
    store: SnapshotStore | None = None
    log_context: LogContext = field(default_factory=LogContext)
    alerts: AlertSlot = field(default_factory=AlertSlot)
    subscribers: dict[type[GameEvent], list[Subscriber]] = field(default_factory=dict)

    verbose: bool = True
    players: PlayerRegistry = field(init=False, repr=False)
    board: BonusCatalog = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Checks config against state and fills an empty board with defaults."""
        base = logging.getLogger(LOGGER_NAME)
        self._logger = base.getChild(f"engine.{id(self)}")

        if self.verbose:
            self._logger.addFilter(ContextFilter(self))

        _ = self.config.validate()
        check_track_bounds(self.state, self.config)
        self.players = PlayerRegistry(self.state, self.rng)
        self.board = BonusCatalog(self.state, self.rng)

        if self.board.setup_defaults():
            _ = self.board.apply_custom_tile(self.config)

    @classmethod
    def from_store(
        cls,
        config: GameConfig,
        store: SnapshotStore,
        rng: random.Random | None = None,
        *,
        verbose: bool = True,
    ) -> GameEngine:
        """Restore the last snapshot from `store`, or start a fresh board."""
        state = store.load() or GameState()
        return cls(
            config=config,
            rng=rng or random.Random(),
            state=state,
            store=store,
            verbose=verbose,
        )

    # --- Operations ---
    def process_gift(self, event: GiftEvent) -> PlayerState:
        self.log_context.start_operation()
        player = process_gift(self, event)
        self._commit("gift")
        return player

    def process_stream_message(self, raw: str | bytes) -> PlayerState | None:
        """Decode a raw socket message and process it if it is a gift."""
        event = decode_gift_event(raw)
        if event is None:
            return None
        return self.process_gift(event)

    def manual_move(self, player_id: int, step: int) -> bool:
        player = self.get_player(player_id)
        self.log_context.start_operation(player.repr if player else "_")
        moved = move(self, player_id, step, source="Manual")
        if moved:
            self._commit("move")
        return moved

    def add_player(self, name: str) -> PlayerState:
        self.log_context.start_operation()
        player = self.add_player_state(name)
        self._commit("add_player")
        return player

    def add_player_state(self, source_name: str) -> PlayerState:
        """Create a player without committing. Shared with gift processing."""
        player = self.players.create(source_name)
        self.publish(PlayerJoinedEvent(player_id=player.id, name=player.name))
        return player

    def remove_player(self, player_id: int) -> bool:
        self.log_context.start_operation()
        removed = self.players.remove(player_id)
        if removed is None:
            return False
        self._commit("remove_player")
        return True

    def reset_board(self) -> None:
        self.log_context.start_operation()
        self.log_info("=== RESET BOARD ===")
        self.players.clear()
        self.state.win_count = 0
        self.board.clear()
        _ = self.board.setup_defaults()
        _ = self.board.apply_custom_tile(self.config)
        self.alerts.current = None
        self._commit("reset")

    def setup_default_bonuses(self) -> bool:
        """Lay out the default board if it has no bonuses. True if it did."""
        self.log_context.start_operation()
        if not self.board.setup_defaults():
            return False
        _ = self.board.apply_custom_tile(self.config)
        self._commit("setup")
        return True

    def apply_custom_tile_config(self) -> None:
        self.log_context.start_operation()
        _ = self.board.apply_custom_tile(self.config)
        self._commit("custom_tile")

    def randomize_bonus_placement(self) -> None:
        self.log_context.start_operation()
        self.board.randomize(self.config.track_length)
        self.log_info(f"Randomized {len(self.board)} bonuses")
        self._commit("randomize")

    def update_config(self, config: GameConfig) -> None:
        """Swap in new settings and re-sync the custom tile with them."""
        _ = config.validate()
        check_track_bounds(self.state, config)

        self.log_context.start_operation()
        self.config = config
        _ = self.board.apply_custom_tile(config)
        self._commit("config")

    # --- Views ---
    def standings(self) -> list[PlayerState]:
        return standings(self.state.players)

    def snapshot(self) -> GameState:
        return copy_state(self.state)

    def get_player(self, player_id: int) -> PlayerState | None:
        return self.players.get(player_id)

    # --- Notifications ---
    def subscribe(self, event_type: type[GameEvent], callback: EventCallback):
        if event_type not in self.subscribers:
            self.subscribers[event_type] = []
        self.subscribers[event_type].append(Subscriber(callback))

    def publish(self, event: GameEvent):
        for sub in self.subscribers.get(type(event), ()):
            sub.callback(event, self)

    def post_alert(self, title: str, message: str) -> Alert:
        alert = self.alerts.post(title, message)
        self.log_debug(f"Alert: {title} / {message}")
        return alert

    def _commit(self, reason: StateChangeReason) -> None:
        if self.store is not None:
            self.store.save(self.state)
        self.publish(StateChangedEvent(reason=reason))

    # -- Logging --
    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        """Core logging helper; respects engine verbosity."""
        if not self.verbose:
            return
        self._logger.log(level, msg, *args, **kwargs)

    def log_debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def log_info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def log_warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)
