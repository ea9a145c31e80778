import pytest

from giftboard.config import GameConfig, PartialGameConfig
from giftboard.core.errors import ConfigurationError


def test_defaults_match_reference_board():
    config = GameConfig().validate()

    assert config.track_length == 30
    assert config.cost_per_move == 1000
    assert config.final_tile == 29
    assert config.enable_custom is False


def test_is_enabled_maps_every_kind():
    config = GameConfig(
        enable_setback=False,
        enable_relocate_reward=True,
        enable_spin=False,
        enable_shirt=True,
        enable_gold=False,
        enable_custom=True,
    )

    assert config.is_enabled("Setback") is False
    assert config.is_enabled("RelocateReward") is True
    assert config.is_enabled("Spin") is False
    assert config.is_enabled("Shirt") is True
    assert config.is_enabled("Gold") is False
    assert config.is_enabled("Custom") is True


def test_with_kinds_returns_a_new_config():
    config = GameConfig()

    changed = config.with_kinds({"Gold": False, "Custom": True})

    assert config.enable_gold is True
    assert changed.enable_gold is False
    assert changed.enable_custom is True


@pytest.mark.parametrize(
    "config",
    [
        GameConfig(track_length=10),
        GameConfig(cost_per_move=0),
        GameConfig(custom_tile_index=30),
        GameConfig(custom_tile_index=-1),
    ],
)
def test_validate_rejects_bad_settings(config):
    with pytest.raises(ConfigurationError):
        _ = config.validate()


def test_from_toml(tmp_path):
    path = tmp_path / "board.toml"
    _ = path.write_text(
        "cost_per_move = 500\n"
        "enable_spin = false\n"
        "enable_custom = true\n"
        'custom_title = "PIZZA"\n',
    )

    config = GameConfig.from_toml(path)

    assert config.cost_per_move == 500
    assert config.enable_spin is False
    assert config.custom_title == "PIZZA"
    assert config.track_length == 30


def test_from_toml_rejects_unknown_keys(tmp_path):
    path = tmp_path / "board.toml"
    _ = path.write_text("cost_per_moves = 500\n")

    with pytest.raises(ConfigurationError):
        _ = GameConfig.from_toml(path)


def test_partial_config_only_overrides_set_fields(tmp_path):
    path = tmp_path / "partial.toml"
    _ = path.write_text("enable_gold = false\ncustom_tile_index = 3\n")
    base = GameConfig(cost_per_move=250)

    merged = PartialGameConfig.from_toml(path).apply(base)

    assert merged.cost_per_move == 250
    assert merged.enable_gold is False
    assert merged.custom_tile_index == 3
    assert merged.enable_spin is True
