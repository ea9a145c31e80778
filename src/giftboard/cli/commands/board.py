"""CLI commands acting on the whole board."""

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
    print_standings,
)
from giftboard.storage import DEFAULT_STATE_PATH


@cappa.command(
    name="reset",
    help="Clear all players and rebuild the default board (plus the custom tile).",
)
@dataclass
class ResetCommand:
    state: StatePath = DEFAULT_STATE_PATH
    config_file: ConfigPath = None

    def __call__(self):
        engine = open_engine(self.state, load_config(self.config_file))
        with engine_errors():
            engine.reset_board()
        console.print(f"Board reset with {len(engine.board)} bonuses.")


@cappa.command(name="randomize", help="Shuffle every bonus onto new inner tiles.")
@dataclass
class RandomizeCommand:
    seed: Annotated[
        int | None,
        cappa.Arg(short="-s", long="--seed", help="RNG seed."),
    ] = None
    state: StatePath = DEFAULT_STATE_PATH
    config_file: ConfigPath = None

    def __call__(self):
        engine = open_engine(self.state, load_config(self.config_file), self.seed)
        with engine_errors():
            engine.randomize_bonus_placement()

        for bonus in sorted(engine.board, key=lambda b: b.tile_index):
            status = "claimed" if bonus.claimed else "open"
            console.print(f"Tile {bonus.tile_index + 1:>2}: {bonus.kind} ({status})")


@cappa.command(name="custom-tile", help="Re-sync the custom tile with the config.")
@dataclass
class CustomTileCommand:
    state: StatePath = DEFAULT_STATE_PATH
    config_file: ConfigPath = None

    def __call__(self):
        config = load_config(self.config_file)
        engine = open_engine(self.state, config)
        with engine_errors():
            engine.apply_custom_tile_config()
        if config.enable_custom:
            console.print(
                f"Custom tile '{config.custom_title}' on tile {config.custom_tile_index + 1}.",
            )
        else:
            console.print("Custom tile disabled and removed.")


@cappa.command(name="standings", help="Show the live leaderboard.")
@dataclass
class StandingsCommand:
    state: StatePath = DEFAULT_STATE_PATH
    config_file: ConfigPath = None

    def __call__(self):
        engine = open_engine(self.state, load_config(self.config_file))
        print_standings(engine)
