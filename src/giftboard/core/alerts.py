from __future__ import annotations

import itertools
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Alert:
    id: int
    title: str
    message: str


@dataclass
class AlertSlot:
    """
    Single most-recent alert for the presentation layer.

    Posting replaces whatever is in the slot, shown or not. Rapid triggers
    inside one operation (e.g. a bonus followed by a finish) leave only the
    last alert visible.
    """

    current: Alert | None = None
    _ids: itertools.count[int] = field(
        default_factory=lambda: itertools.count(1),
        repr=False,
    )

    def post(self, title: str, message: str) -> Alert:
        alert = Alert(id=next(self._ids), title=title, message=message)
        self.current = alert
        return alert

    def peek(self) -> Alert | None:
        return self.current

    def consume(self) -> Alert | None:
        alert, self.current = self.current, None
        return alert

    def dismiss(self, alert_id: int) -> bool:
        """Clear the slot only if it still holds the given alert."""
        if self.current is None or self.current.id != alert_id:
            return False
        self.current = None
        return True
