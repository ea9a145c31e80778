"""Game configuration schema using msgspec."""

from __future__ import annotations

from pathlib import Path
from typing import assert_never

import msgspec

from giftboard.core.errors import ConfigurationError
from giftboard.core.types import BonusKind

DEFAULT_TRACK_LENGTH = 30
DEFAULT_COST_PER_MOVE = 1000


class GameConfig(msgspec.Struct, frozen=True, forbid_unknown_fields=True):
    """
    Immutable settings read by the engine on every operation.

    Owned by the surrounding application; the engine only ever swaps in a
    whole new instance through `GameEngine.update_config`.
    """

    track_length: int = DEFAULT_TRACK_LENGTH
    cost_per_move: int = DEFAULT_COST_PER_MOVE

    enable_setback: bool = True
    enable_relocate_reward: bool = True
    enable_spin: bool = True
    enable_shirt: bool = True
    enable_gold: bool = True

    enable_custom: bool = False
    custom_tile_index: int = 14
    custom_title: str = "MYSTERY BOX!"
    custom_message: str = "You found the secret stash!"

    @property
    def final_tile(self) -> int:
        return self.track_length - 1

    def is_enabled(self, kind: BonusKind) -> bool:
        match kind:
            case "Setback":
                return self.enable_setback
            case "RelocateReward":
                return self.enable_relocate_reward
            case "Spin":
                return self.enable_spin
            case "Shirt":
                return self.enable_shirt
            case "Gold":
                return self.enable_gold
            case "Custom":
                return self.enable_custom
            case _:
                assert_never(kind)

    def with_kinds(self, kinds: dict[BonusKind, bool]) -> GameConfig:
        """Copy of this config with the given per-kind enable flags replaced."""
        changes = {_ENABLE_FIELDS[kind]: enabled for kind, enabled in kinds.items()}
        return msgspec.structs.replace(self, **changes)

    def validate(self) -> GameConfig:
        # Imported here: the board module needs this one for typing
        from giftboard.engine.board import min_track_length

        minimum = min_track_length()
        if self.track_length < minimum:
            msg = f"track_length must be at least {minimum}, got {self.track_length}."
            raise ConfigurationError(msg)
        if self.cost_per_move < 1:
            msg = f"cost_per_move must be positive, got {self.cost_per_move}."
            raise ConfigurationError(msg)
        if not 0 <= self.custom_tile_index < self.track_length:
            msg = (
                f"custom_tile_index {self.custom_tile_index} is outside "
                f"the track (0..{self.final_tile})."
            )
            raise ConfigurationError(msg)
        return self

    @classmethod
    def from_toml(cls, path: str | Path) -> GameConfig:
        """Load and validate a complete configuration from a TOML file."""
        with Path(path).open("rb") as f:
            try:
                config = msgspec.toml.decode(f.read(), type=cls)
            except msgspec.DecodeError as e:
                msg = f"Invalid TOML config {path}: {e}"
                raise ConfigurationError(msg) from e
        return config.validate()


_ENABLE_FIELDS: dict[BonusKind, str] = {
    "Setback": "enable_setback",
    "RelocateReward": "enable_relocate_reward",
    "Spin": "enable_spin",
    "Shirt": "enable_shirt",
    "Gold": "enable_gold",
    "Custom": "enable_custom",
}


class PartialGameConfig(msgspec.Struct, forbid_unknown_fields=True):
    """
    Partial configuration for layering a TOML file over the defaults.
    Same keys as GameConfig, every one optional.
    """

    track_length: int | None = None
    cost_per_move: int | None = None
    enable_setback: bool | None = None
    enable_relocate_reward: bool | None = None
    enable_spin: bool | None = None
    enable_shirt: bool | None = None
    enable_gold: bool | None = None
    enable_custom: bool | None = None
    custom_tile_index: int | None = None
    custom_title: str | None = None
    custom_message: str | None = None

    @classmethod
    def from_toml(cls, path: str | Path) -> PartialGameConfig:
        with Path(path).open("rb") as f:
            try:
                return msgspec.toml.decode(f.read(), type=cls)
            except msgspec.DecodeError as e:
                msg = f"Invalid TOML config {path}: {e}"
                raise ConfigurationError(msg) from e

    def apply(self, base: GameConfig) -> GameConfig:
        """Overlay every field that is set here on top of `base`."""
        changes = {
            name: value
            for name, value in msgspec.structs.asdict(self).items()
            if value is not None
        }
        return msgspec.structs.replace(base, **changes)
