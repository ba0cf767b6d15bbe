from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from hookrelay.schemas.discord import DiscordMessage
from hookrelay.schemas.webhook import EventKind


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup over a plain mapping"""
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


class WebhookHandler(ABC):
    @abstractmethod
    def validate_webhook(self, headers: Mapping[str, str], body: Any) -> bool:
        """Validate the webhook signature/authenticity"""
        pass

    @abstractmethod
    def classify_webhook(self, headers: Mapping[str, str]) -> EventKind:
        """Determine which kind of event the request carries"""
        pass

    @abstractmethod
    def process_webhook(self, kind: EventKind, payload: Mapping[str, Any]) -> DiscordMessage:
        """Convert webhook payload to a Discord message"""
        pass
