from typing import Any, Mapping

from hookrelay.schemas.discord import DiscordMessage
from hookrelay.schemas.webhook import EventKind
from hookrelay.services.classifier import classify
from hookrelay.services.signature import verify_signature
from hookrelay.services.transformers import transform

from .base import WebhookHandler, get_header

EVENT_KEY_HEADER = "X-Event-Key"
SIGNATURE_HEADER = "X-Hub-Signature"


class BitbucketWebhookHandler(WebhookHandler):
    def __init__(self, webhook_secret: str):
        self.webhook_secret = webhook_secret

    def validate_webhook(self, headers: Mapping[str, str], body: Any) -> bool:
        signature = get_header(headers, SIGNATURE_HEADER)
        if signature is None or get_header(headers, EVENT_KEY_HEADER) is None:
            return False

        return verify_signature(body, signature, self.webhook_secret)

    def classify_webhook(self, headers: Mapping[str, str]) -> EventKind:
        return classify(get_header(headers, EVENT_KEY_HEADER))

    def process_webhook(self, kind: EventKind, payload: Mapping[str, Any]) -> DiscordMessage:
        return transform(kind, payload)
