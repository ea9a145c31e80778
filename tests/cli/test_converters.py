import cappa
import pytest

from giftboard.cli.converters import parse_step, validate_bonus_kinds


def test_bonus_kinds_are_matched_loosely():
    kinds = validate_bonus_kinds(["setback", "relocate-reward", "GOLD", "custom"])
    assert kinds == ["Setback", "RelocateReward", "Gold", "Custom"]


def test_unknown_bonus_kind_suggests_close_match():
    with pytest.raises(cappa.Exit) as exc_info:
        _ = validate_bonus_kinds(["Shrit"])
    assert "Shirt" in str(exc_info.value.message)


@pytest.mark.parametrize(("raw", "step"), [("1", 1), ("-1", -1), ("+3", 3), (" 2 ", 2)])
def test_parse_step(raw, step):
    assert parse_step(raw) == step


@pytest.mark.parametrize("raw", ["0", "two", ""])
def test_parse_step_rejects_bad_values(raw):
    with pytest.raises(cappa.Exit):
        _ = parse_step(raw)
