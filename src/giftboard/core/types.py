from typing import Literal

BonusKind = Literal[
    "Setback",
    "RelocateReward",
    "Spin",
    "Shirt",
    "Gold",
    "Custom",
]


StateChangeReason = Literal[
    "gift",
    "move",
    "add_player",
    "remove_player",
    "reset",
    "randomize",
    "setup",
    "custom_tile",
    "config",
]
