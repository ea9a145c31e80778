"""Helpers shared by the operator commands."""

from __future__ import annotations

import random
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import cappa
from rich.console import Console
from rich.table import Table

from giftboard.config import GameConfig, PartialGameConfig
from giftboard.core.errors import GiftBoardError
from giftboard.core.palettes import PAWN_PALETTE
from giftboard.engine.game_engine import GameEngine
from giftboard.storage import DEFAULT_STATE_PATH, JsonFileStore

if TYPE_CHECKING:
    from collections.abc import Iterator

    from giftboard.core.state import PlayerState
    from giftboard.core.types import BonusKind

console = Console()

StatePath = Annotated[
    Path,
    cappa.Arg(long="--state", help="Path to the JSON game state snapshot."),
]
ConfigPath = Annotated[
    Path | None,
    cappa.Arg(short="-c", long="--config", help="Path to TOML config file."),
]


@contextmanager
def engine_errors() -> Iterator[None]:
    """Turn engine errors into a clean CLI exit."""
    try:
        yield
    except GiftBoardError as e:
        raise cappa.Exit(str(e), code=1) from e


def load_config(
    config_file: Path | None,
    *,
    cost_per_move: int | None = None,
    disabled: list[BonusKind] | None = None,
    enabled: list[BonusKind] | None = None,
) -> GameConfig:
    """Defaults, then the TOML file, then command-line overrides."""
    config = GameConfig()

    if config_file:
        if not config_file.exists():
            msg = f"Config file not found: {config_file}"
            raise cappa.Exit(msg, code=1)
        with engine_errors():
            config = PartialGameConfig.from_toml(config_file).apply(config)

    if cost_per_move is not None:
        config = PartialGameConfig(cost_per_move=cost_per_move).apply(config)

    kinds: dict[BonusKind, bool] = {}
    for kind in enabled or []:
        kinds[kind] = True
    for kind in disabled or []:
        kinds[kind] = False
    if kinds:
        config = config.with_kinds(kinds)

    with engine_errors():
        return config.validate()


def open_engine(
    state_path: Path,
    config: GameConfig,
    seed: int | None = None,
) -> GameEngine:
    """Restore the saved game; a snapshot that does not fit `config` exits."""
    rng = random.Random(seed)
    with engine_errors():
        return GameEngine.from_store(config, JsonFileStore(state_path), rng)


def resolve_player(engine: GameEngine, ref: str) -> PlayerState:
    """Look a player up by numeric id or by (normalized) name."""
    player = None
    if ref.isdigit():
        player = engine.get_player(int(ref))
    if player is None:
        player = engine.players.find_by_name(ref[:4].upper())
    if player is None:
        msg = f"Player '{ref}' not found."
        raise cappa.Exit(msg, code=1)
    return player


def print_alert(engine: GameEngine) -> None:
    alert = engine.alerts.consume()
    if alert is not None:
        console.print(f"[bold magenta]{alert.title}[/]  {alert.message}")


def print_standings(engine: GameEngine) -> None:
    players = engine.standings()
    if not players:
        console.print("[dim]No players yet.[/]")
        return

    table = Table(title="🏆 LIVE STANDINGS")
    table.add_column("#", justify="right")
    table.add_column("ID", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Coins", justify="right")
    table.add_column("Status")

    for place, player in enumerate(players, start=1):
        color = PAWN_PALETTE[player.color_index]
        if player.finish_rank is not None:
            status = f"🏁 FINISHED #{player.finish_rank}"
        else:
            status = f"Tile {player.tile_index + 1}"
        table.add_row(
            str(place),
            str(player.id),
            f"[{color.hex}]●[/] {player.name}",
            str(player.lifetime_coins),
            status,
        )
    console.print(table)
