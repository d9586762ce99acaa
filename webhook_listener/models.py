# webhook_listener/models.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def _to_millis(now: datetime) -> datetime:
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)

def iso_timestamp(now: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    return _to_millis(now).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def epoch_millis(now: datetime) -> int:
    return (_to_millis(now) - EPOCH) // timedelta(milliseconds=1)

@dataclass(frozen=True)
class WebhookRecord:
    id: str
    payload: Any
    timestamp: str
    received_at: int

    @classmethod
    def build(cls, record_id: str, payload: Any, now: datetime) -> "WebhookRecord":
        # both encodings come from the same instant
        return cls(
            id=record_id,
            payload=payload,
            timestamp=iso_timestamp(now),
            received_at=epoch_millis(now),
        )

    def to_item(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "payload": self.payload,
            "timestamp": self.timestamp,
            "receivedAt": self.received_at,
        }

    def __repr__(self):
        return f"<WebhookRecord id={self.id} timestamp={self.timestamp}>"
