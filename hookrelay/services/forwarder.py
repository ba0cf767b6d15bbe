import logging
from typing import Optional

import httpx

from hookrelay.schemas.discord import DiscordMessage
from hookrelay.schemas.webhook import ForwardResult


class DiscordForwarder:
    """Posts relay messages to a Discord webhook, once, without retrying"""

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        self.http_client = http_client
        self.logger = logging.getLogger(__name__)

    async def forward(self, webhook_url: str, message: DiscordMessage) -> ForwardResult:
        """
        Send a message to Discord.

        A non-2xx answer is a failed delivery carrying Discord's reason
        phrase; transport errors propagate to the caller.
        """
        if self.http_client is not None:
            response = await self._post(self.http_client, webhook_url, message)
        else:
            async with httpx.AsyncClient() as client:
                response = await self._post(client, webhook_url, message)

        delivered = response.is_success
        if delivered:
            self.logger.info(f"Discord accepted message ({response.status_code})")
        else:
            self.logger.warning(
                f"Discord rejected message: {response.status_code} {response.reason_phrase}"
            )
        return ForwardResult(delivered=delivered, status_text=response.reason_phrase)

    async def _post(
        self, client: httpx.AsyncClient, webhook_url: str, message: DiscordMessage
    ) -> httpx.Response:
        return await client.post(
            webhook_url,
            headers={"Content-Type": "application/json"},
            content=message.model_dump_json(),
        )
