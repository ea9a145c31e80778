from __future__ import annotations

import logging
from dataclasses import dataclass

import cappa

from giftboard.cli.commands.board import (  # noqa: TC001 # cappa needs these at runtime
    CustomTileCommand,
    RandomizeCommand,
    ResetCommand,
    StandingsCommand,
)
from giftboard.cli.commands.game import (  # noqa: TC001
    AddCommand,
    GiftCommand,
    MoveCommand,
    RemoveCommand,
)
from giftboard.cli.commands.replay import ReplayCommand  # noqa: TC001
from giftboard.engine.logging import configure_logging


@dataclass
class Main:
    subcommand: cappa.Subcommands[
        GiftCommand
        | MoveCommand
        | AddCommand
        | RemoveCommand
        | ResetCommand
        | RandomizeCommand
        | CustomTileCommand
        | StandingsCommand
        | ReplayCommand
    ]


def main():
    configure_logging(logging.INFO)
    cappa.invoke(Main)


if __name__ == "__main__":
    main()
