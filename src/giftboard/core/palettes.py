from typing import NamedTuple


class PawnColor(NamedTuple):
    name: str
    hex: str


PAWN_PALETTE: tuple[PawnColor, ...] = (
    PawnColor("red", "#FF3B30"),
    PawnColor("blue", "#007AFF"),
    PawnColor("orange", "#FF9500"),
    PawnColor("purple", "#AF52DE"),
    PawnColor("pink", "#FF2D55"),
    PawnColor("cyan", "#32ADE6"),
    PawnColor("green", "#34C759"),
    PawnColor("yellow", "#FFCC00"),  # gold marker
)

GOLD_COLOR_INDEX = len(PAWN_PALETTE) - 1

# Random pawn colours are drawn from [0, MAX_RANDOM_COLOR_INDEX].
MAX_RANDOM_COLOR_INDEX = GOLD_COLOR_INDEX - 1
