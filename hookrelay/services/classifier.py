from typing import Dict, Optional

from hookrelay.schemas.webhook import EventKind

EVENT_KEYS: Dict[str, EventKind] = {
    kind.value: kind for kind in EventKind if kind is not EventKind.UNKNOWN
}


def classify(event_key: Optional[str]) -> EventKind:
    """Map an ``X-Event-Key`` header to an event kind, case-sensitive"""
    if not isinstance(event_key, str):
        return EventKind.UNKNOWN
    return EVENT_KEYS.get(event_key, EventKind.UNKNOWN)
