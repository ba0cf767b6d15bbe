import json
import logging
from typing import Any, Mapping, Optional

from hookrelay.core.errors import (
    AuthenticationError,
    ClassificationError,
    ConfigurationError,
    ForwardingError,
    RelayError,
)
from hookrelay.schemas.discord import DiscordMessage
from hookrelay.schemas.webhook import EventKind, RelayResponse
from hookrelay.services.forwarder import DiscordForwarder
from hookrelay.services.webhook_handlers import BitbucketWebhookHandler

logger = logging.getLogger(__name__)


class RelayService:
    """
    Relays one Bitbucket webhook invocation to Discord.

    Secrets are passed in by the caller; the service never reads the
    environment. Every call to ``handle`` ends in exactly one response and
    never raises.
    """

    def __init__(
        self,
        webhook_secret: Optional[str],
        discord_url: Optional[str],
        forwarder: Optional[DiscordForwarder] = None,
    ):
        self.webhook_secret = webhook_secret
        self.discord_url = discord_url
        self.forwarder = forwarder if forwarder is not None else DiscordForwarder()

    async def handle(self, headers: Mapping[str, str], body: Any) -> RelayResponse:
        try:
            await self._relay(headers, body)
        except RelayError as e:
            return RelayResponse(status_code=e.status_code, message=e.detail)
        except Exception:
            logger.exception("Error handling webhook")
            return RelayResponse(status_code=500, message="Internal Server Error")

        return RelayResponse(status_code=200, message="Success")

    async def _relay(self, headers: Mapping[str, str], body: Any) -> None:
        if not self.webhook_secret or not self.discord_url:
            logger.error("Webhook secret or Discord URL is not configured")
            raise ConfigurationError()

        handler = BitbucketWebhookHandler(self.webhook_secret)

        if not handler.validate_webhook(headers, body):
            logger.warning("Rejected webhook with missing or invalid signature")
            raise AuthenticationError()

        kind = handler.classify_webhook(headers)
        if kind is EventKind.UNKNOWN:
            logger.info("Ignoring unsupported event type")
            raise ClassificationError()

        message = handler.process_webhook(kind, self._parse_body(body))
        await self._forward(kind, message)

    async def _forward(self, kind: EventKind, message: DiscordMessage) -> None:
        logger.info(f"Forwarding {kind.value} event to Discord")
        result = await self.forwarder.forward(self.discord_url, message)
        if not result.delivered:
            raise ForwardingError(result.status_text)

    @staticmethod
    def _parse_body(body: Any) -> Mapping[str, Any]:
        if isinstance(body, (bytes, bytearray, str)):
            body = json.loads(body)
        if not isinstance(body, Mapping):
            raise ValueError(f"Expected a JSON object, got {type(body).__name__}")
        return body
