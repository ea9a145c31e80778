"""
Streamer.bot event envelope decoding.

Only TikTok gift events reach the engine; everything else the socket
delivers is dropped here.
"""

from __future__ import annotations

import msgspec

from giftboard.core.errors import ValidationError

GIFT_SOURCE = "TikTok"
GIFT_TYPE = "Gift"


class GiftEvent(msgspec.Struct, frozen=True):
    """A normalized gift: who sent it, how many, and what each was worth."""

    source_name: str
    gift_count: int = 1
    coins_per_gift: int = 1


class EventSource(msgspec.Struct, frozen=True):
    source: str
    type: str

    @property
    def is_gift(self) -> bool:
        return self.source == GIFT_SOURCE and self.type == GIFT_TYPE


class UserData(msgspec.Struct, frozen=True):
    name: str


class GiftData(msgspec.Struct, frozen=True):
    name: str
    count: int
    coins: int | None = None


class EventData(msgspec.Struct, frozen=True):
    user: UserData
    gift: GiftData


class StreamEvent(msgspec.Struct, frozen=True):
    event: EventSource
    data: EventData

    def to_gift_event(self) -> GiftEvent:
        gift = self.data.gift
        return GiftEvent(
            source_name=self.data.user.name,
            gift_count=gift.count,
            coins_per_gift=1 if gift.coins is None else gift.coins,
        )


class _Envelope(msgspec.Struct):
    event: EventSource


_stream_decoder = msgspec.json.Decoder(StreamEvent)
_envelope_decoder = msgspec.json.Decoder(_Envelope)


def decode_gift_event(raw: str | bytes) -> GiftEvent | None:
    """
    Decode one raw socket message.

    Returns None for anything that is not a TikTok gift. A gift envelope with
    a malformed body raises ValidationError.
    """
    try:
        envelope = _envelope_decoder.decode(raw)
    except msgspec.DecodeError:
        # Subscription acks and other non-event frames
        return None

    if not envelope.event.is_gift:
        return None

    try:
        event = _stream_decoder.decode(raw)
    except msgspec.DecodeError as e:
        msg = f"Malformed gift event: {e}"
        raise ValidationError(msg) from e
    return event.to_gift_event()
