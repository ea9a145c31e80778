"""CLI command replaying a recorded stream of raw socket messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path  # cappa needs this at runtime
from typing import Annotated

import cappa
from tqdm import tqdm

from giftboard.cli.common import (
    ConfigPath,  # noqa: TC001 # cappa needs to know about this at runtime
    StatePath,  # noqa: TC001
    console,
    engine_errors,
    load_config,
    open_engine,
    print_standings,
)
from giftboard.core.errors import ValidationError
from giftboard.core.events import PlayerFinishedEvent
from giftboard.storage import DEFAULT_STATE_PATH

logger = logging.getLogger(__name__)


@cappa.command(
    name="replay",
    help="Feed a JSON-lines file of Streamer.bot messages through the engine.",
)
@dataclass
class ReplayCommand:
    events_file: Annotated[Path, cappa.Arg(help="One raw socket message per line.")]
    seed: Annotated[
        int | None,
        cappa.Arg(short="-s", long="--seed", help="RNG seed."),
    ] = None
    fresh: Annotated[
        bool,
        cappa.Arg(long="--fresh", help="Reset the board before replaying."),
    ] = False
    state: StatePath = DEFAULT_STATE_PATH
    config_file: ConfigPath = None

    def __call__(self):
        if not self.events_file.exists():
            msg = f"Events file not found: {self.events_file}"
            raise cappa.Exit(msg, code=1)

        engine = open_engine(self.state, load_config(self.config_file), self.seed)
        if self.fresh:
            with engine_errors():
                engine.reset_board()

        engine.subscribe(
            PlayerFinishedEvent,
            lambda event, eng: tqdm.write(
                f"🏁 {eng.get_player(event.player_id).name} finished #{event.finish_rank}",
            ),
        )

        lines = self.events_file.read_text(encoding="utf-8").splitlines()
        gifts = skipped = rejected = 0

        with (
            engine_errors(),
            tqdm(lines, desc="Replaying", unit="msg", dynamic_ncols=True) as pbar,
        ):
            for line_no, line in enumerate(pbar, start=1):
                if not line.strip():
                    continue
                try:
                    player = engine.process_stream_message(line)
                except ValidationError as e:
                    rejected += 1
                    logger.warning(f"Line {line_no}: {e}")
                    continue
                if player is None:
                    skipped += 1
                else:
                    gifts += 1

        console.print(
            f"Processed {gifts} gifts, skipped {skipped} other messages, "
            f"rejected {rejected}.",
        )
        print_standings(engine)
