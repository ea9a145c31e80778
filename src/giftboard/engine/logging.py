from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, get_args

from rich.logging import RichHandler
from typing_extensions import override

from giftboard.core import LOGGER_NAME
from giftboard.core.types import BonusKind

if TYPE_CHECKING:
    from giftboard.core.state import LogContext
    from giftboard.engine.game_engine import GameEngine

BONUS_KINDS = set(get_args(BonusKind))


# Precompiled regex patterns for highlighting
BONUS_PATTERN = re.compile(rf"\b({'|'.join(map(re.escape, BONUS_KINDS))})\b")
PLAYER_PATTERN = re.compile(r"\b(\d+:[^\s(]+)")


# Simple color theme for Rich
COLOR = {
    "move": "bold green",
    "gift": "bold cyan",
    "warning": "bold red",
    "bonus": "bold blue",
    "player": "yellow",
    "prefix": "dim",
    "level": "bold",
}


class ContextFilter(logging.Filter):
    """Inject per-engine runtime context into every log record."""

    def __init__(self, engine: GameEngine, name: str = "") -> None:
        super().__init__(name)
        self.engine: GameEngine = engine

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        logctx: LogContext = self.engine.log_context
        record.operation_count = logctx.operation_count
        record.operation_log_count = logctx.operation_log_count
        record.player_repr = logctx.current_player_repr
        logctx.inc_log_count()
        return True


class RichMarkupFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        operation_count = getattr(record, "operation_count", 0)
        operation_log_count = getattr(record, "operation_log_count", 0)
        player_repr = getattr(record, "player_repr", "_")

        prefix = f"{operation_count}.{player_repr}.{operation_log_count}"

        # Markup in player names must not leak into rich
        styled = record.getMessage().replace("[", r"\[")

        styled = re.sub(r"\bMove\b", f"[{COLOR['move']}]Move[/{COLOR['move']}]", styled)
        styled = re.sub(r"\bGift\b", f"[{COLOR['gift']}]Gift[/{COLOR['gift']}]", styled)
        styled = re.sub(
            r"\bBonus\b",
            f"[{COLOR['bonus']}]Bonus[/{COLOR['bonus']}]",
            styled,
        )

        styled = BONUS_PATTERN.sub(rf"[{COLOR['bonus']}]\1[/{COLOR['bonus']}]", styled)
        styled = PLAYER_PATTERN.sub(rf"[{COLOR['player']}]\1[/{COLOR['player']}]", styled)

        # Emphasis for "!!!"
        styled = re.sub(r"!!!", f"[{COLOR['warning']}]!!![/{COLOR['warning']}]", styled)

        # Coins
        styled = re.sub(r"(\+\d+ coins)", r"[bold green]\1[/]", styled)

        # If warning or higher, tint whole message
        if record.levelno >= logging.WARNING:
            styled = f"[{COLOR['warning']}]{styled}[/{COLOR['warning']}]"

        # Final string: prefix + message (no level, RichHandler already shows it)
        return f"[{COLOR['prefix']}]{prefix}[/{COLOR['prefix']}]  {styled}"


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    handler = RichHandler(markup=True, show_path=False, show_time=False)
    handler.setFormatter(RichMarkupFormatter())
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
