from fastapi import Depends

from hookrelay.core.config import Settings, get_settings
from hookrelay.services.forwarder import DiscordForwarder
from hookrelay.services.relay import RelayService


def get_forwarder() -> DiscordForwarder:
    return DiscordForwarder()


def get_relay_service(
    settings: Settings = Depends(get_settings),
    forwarder: DiscordForwarder = Depends(get_forwarder),
) -> RelayService:
    return RelayService(
        webhook_secret=settings.BITBUCKET_KEY,
        discord_url=settings.DISCORD_URL,
        forwarder=forwarder,
    )
