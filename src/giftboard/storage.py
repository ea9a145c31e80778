"""Snapshot persistence for the game state."""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Protocol

import msgspec

from giftboard.core import LOGGER_NAME
from giftboard.core.state import GameState

logger = logging.getLogger(LOGGER_NAME)

DEFAULT_STATE_PATH = Path("giftboard_state.json")


def copy_state(state: GameState) -> GameState:
    """Detached copy; players and bonuses only hold immutable scalars."""
    return replace(
        state,
        players=[replace(p) for p in state.players],
        bonuses=[replace(b) for b in state.bonuses],
    )


def encode_state(state: GameState) -> bytes:
    return msgspec.json.encode(state)


def decode_state(data: bytes | str) -> GameState:
    return msgspec.json.decode(data, type=GameState)


class SnapshotStore(Protocol):
    def load(self) -> GameState | None: ...

    def save(self, state: GameState) -> None: ...


class MemoryStore:
    """Keeps the latest snapshot in memory. Used by tests and dry runs."""

    def __init__(self, state: GameState | None = None) -> None:
        self.saved: GameState | None = state
        self.save_count = 0

    def load(self) -> GameState | None:
        return None if self.saved is None else copy_state(self.saved)

    def save(self, state: GameState) -> None:
        self.saved = copy_state(state)
        self.save_count += 1


class JsonFileStore:
    """
    Whole-state JSON snapshot on disk.
    Writes go to a sibling temp file first and are swapped in atomically.
    """

    def __init__(self, path: Path = DEFAULT_STATE_PATH) -> None:
        self.path = path

    def load(self) -> GameState | None:
        if not self.path.exists():
            return None
        try:
            state = decode_state(self.path.read_bytes())
        except msgspec.DecodeError:
            logger.exception(f"STORE: Unreadable snapshot at {self.path}, starting fresh")
            return None
        logger.info(
            f"STORE: Loaded {len(state.players)} players and "
            f"{len(state.bonuses)} bonuses from {self.path}",
        )
        return state

    def save(self, state: GameState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        _ = tmp_path.write_bytes(encode_state(state))
        os.replace(tmp_path, self.path)
        logger.debug(f"STORE: Saved snapshot to {self.path}")
