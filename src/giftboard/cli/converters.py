from __future__ import annotations

import difflib
from typing import get_args

import cappa

from giftboard.core.types import BonusKind


def _normalize(s: str) -> str:
    """Normalize string: remove whitespace, dashes, underscores and lowercase."""
    return s.strip().replace(" ", "").replace("-", "").replace("_", "").lower()


def validate_bonus_kinds(kind_args: list[str]) -> list[BonusKind]:
    """
    Resolve bonus kind names with fuzzy matching.
    Input "relocate-reward" matches "RelocateReward".
    """
    lookup_map: dict[str, BonusKind] = {_normalize(k): k for k in get_args(BonusKind)}

    kinds: list[BonusKind] = []
    for kind_arg in kind_args:
        normalized_input = _normalize(kind_arg)
        if normalized_input in lookup_map:
            kinds.append(lookup_map[normalized_input])
            continue

        canonical_names = get_args(BonusKind)
        matches = difflib.get_close_matches(kind_arg, canonical_names, n=3, cutoff=0.5)

        msg = f"Bonus kind '{kind_arg}' not found."
        if matches:
            msg += f" Did you mean: {', '.join(matches)}?"

        raise cappa.Exit(msg, code=1)
    return kinds


def parse_step(value: str) -> int:
    """Parse a signed step such as "+2", "-1" or "3"."""
    try:
        step = int(value.strip())
    except ValueError:
        msg = f"Invalid step '{value}'. Expected a whole number like 1 or -1."
        raise cappa.Exit(msg, code=1)  # noqa: B904
    if step == 0:
        msg = "Step must not be 0."
        raise cappa.Exit(msg, code=1)
    return step
