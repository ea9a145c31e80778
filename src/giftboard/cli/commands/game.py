"""CLI commands acting on a single player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import cappa

from giftboard.cli.common import (
    ConfigPath,  # noqa: TC001 # cappa needs to know about this at runtime
    StatePath,  # noqa: TC001
    console,
    engine_errors,
    load_config,
    open_engine,
    print_alert,
    print_standings,
    resolve_player,
)
from giftboard.cli.converters import parse_step, validate_bonus_kinds
from giftboard.core.types import BonusKind  # noqa: TC001
from giftboard.storage import DEFAULT_STATE_PATH
from giftboard.stream import GiftEvent


@cappa.command(
    name="gift",
    help="Simulate a gift. Picks a TEST_ viewer name if none is given.",
)
@dataclass
class GiftCommand:
    name: Annotated[
        str | None,
        cappa.Arg(short="-n", long="--name", help="Viewer name sending the gift."),
    ] = None
    coins: Annotated[
        int,
        cappa.Arg(long="--coins", help="Coin value of one gift."),
    ] = 1000
    count: Annotated[
        int,
        cappa.Arg(long="--count", help="How many gifts were sent."),
    ] = 1
    cost_per_move: Annotated[
        int | None,
        cappa.Arg(long="--cost", help="Override coins needed per tile."),
    ] = None
    disable: Annotated[
        list[BonusKind] | None,
        cappa.Arg(
            long="--disable",
            parse=validate_bonus_kinds,
            num_args=-1,
            help="Bonus kinds to switch off.",
        ),
    ] = None
    enable: Annotated[
        list[BonusKind] | None,
        cappa.Arg(
            long="--enable",
            parse=validate_bonus_kinds,
            num_args=-1,
            help="Bonus kinds to switch on.",
        ),
    ] = None
    seed: Annotated[
        int | None,
        cappa.Arg(short="-s", long="--seed", help="RNG seed."),
    ] = None
    state: StatePath = DEFAULT_STATE_PATH
    config_file: ConfigPath = None

    def __call__(self):
        config = load_config(
            self.config_file,
            cost_per_move=self.cost_per_move,
            disabled=self.disable,
            enabled=self.enable,
        )
        engine = open_engine(self.state, config, self.seed)
        name = self.name or f"TEST_{engine.rng.randint(1, 99)}"

        with engine_errors():
            _ = engine.process_gift(
                GiftEvent(
                    source_name=name,
                    gift_count=self.count,
                    coins_per_gift=self.coins,
                ),
            )

        print_alert(engine)
        print_standings(engine)


@cappa.command(name="move", help="Move a player by hand (operator correction).")
@dataclass
class MoveCommand:
    player: Annotated[str, cappa.Arg(help="Player id or name.")]
    step: Annotated[
        int,
        cappa.Arg(
            long="--step",
            parse=parse_step,
            help="Tiles to move; negative moves back and never triggers bonuses.",
        ),
    ] = 1
    state: StatePath = DEFAULT_STATE_PATH
    config_file: ConfigPath = None

    def __call__(self):
        engine = open_engine(self.state, load_config(self.config_file))
        player = resolve_player(engine, self.player)

        with engine_errors():
            moved = engine.manual_move(player.id, self.step)

        if not moved:
            msg = f"{player.name} cannot move {self.step:+d}."
            raise cappa.Exit(msg, code=1)
        print_alert(engine)
        print_standings(engine)


@cappa.command(name="add", help="Add a player by hand.")
@dataclass
class AddCommand:
    name: Annotated[str, cappa.Arg(help="Player name (first 4 letters are kept).")]
    state: StatePath = DEFAULT_STATE_PATH
    config_file: ConfigPath = None

    def __call__(self):
        engine = open_engine(self.state, load_config(self.config_file))
        with engine_errors():
            player = engine.add_player(self.name)
        console.print(f"Added {player.name} (id {player.id}).")


@cappa.command(name="remove", help="Remove a player.")
@dataclass
class RemoveCommand:
    player: Annotated[str, cappa.Arg(help="Player id or name.")]
    state: StatePath = DEFAULT_STATE_PATH
    config_file: ConfigPath = None

    def __call__(self):
        engine = open_engine(self.state, load_config(self.config_file))
        player = resolve_player(engine, self.player)
        _ = engine.remove_player(player.id)
        console.print(f"Removed {player.name}.")
