import pytest

from giftboard.core.errors import ValidationError
from giftboard.stream import GiftEvent, decode_gift_event


def _message(source="TikTok", type_="Gift", gift='{"name": "Rose", "count": 3, "coins": 5}'):
    return (
        f'{{"event": {{"source": "{source}", "type": "{type_}"}}, '
        f'"data": {{"user": {{"name": "Alice123", "id": "9"}}, "gift": {gift}}}, '
        f'"timeStamp": "2024-12-01T18:00:00"}}'
    )


def test_decodes_tiktok_gift():
    event = decode_gift_event(_message())

    assert event == GiftEvent(source_name="Alice123", gift_count=3, coins_per_gift=5)


def test_missing_coins_default_to_one():
    event = decode_gift_event(_message(gift='{"name": "Rose", "count": 2}'))

    assert event is not None
    assert event.coins_per_gift == 1
    assert event.gift_count == 2


@pytest.mark.parametrize(
    ("source", "type_"),
    [("TikTok", "Follow"), ("Twitch", "Gift"), ("YouTube", "SuperChat")],
)
def test_other_events_are_dropped(source, type_):
    assert decode_gift_event(_message(source=source, type_=type_)) is None


def test_non_event_frames_are_dropped():
    assert decode_gift_event('{"id": "123", "status": "ok"}') is None
    assert decode_gift_event("not json") is None


def test_malformed_gift_raises():
    raw = '{"event": {"source": "TikTok", "type": "Gift"}, "data": {"user": {}}}'

    with pytest.raises(ValidationError):
        _ = decode_gift_event(raw)
