from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Webhook secrets, injected by the hosting environment
    BITBUCKET_KEY: str = ''
    DISCORD_URL: str = ''

    PROJECT_NAME: str = "Bitbucket to Discord relay"
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env"
    }


@lru_cache
def get_settings():
    return Settings()


settings = get_settings()
