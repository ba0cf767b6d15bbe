"""Discord webhook execute payload.

Discord rejects messages that exceed its length limits or carry empty
embed field values, so both are normalised on construction.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, field_validator

CONTENT_LIMIT = 2000
TITLE_LIMIT = 256
DESCRIPTION_LIMIT = 4096
FIELD_NAME_LIMIT = 256
FIELD_VALUE_LIMIT = 1024

ELLIPSIS = "…"


def clip(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


class EmbedField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    inline: bool = False

    @field_validator("name")
    @classmethod
    def clip_name(cls, value: str) -> str:
        return clip(value, FIELD_NAME_LIMIT)

    @field_validator("value")
    @classmethod
    def clip_value(cls, value: str) -> str:
        return clip(value, FIELD_VALUE_LIMIT) or "-"


class Embed(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    fields: List[EmbedField] = []

    @field_validator("title")
    @classmethod
    def clip_title(cls, value: str) -> str:
        return clip(value, TITLE_LIMIT)

    @field_validator("description")
    @classmethod
    def clip_description(cls, value: str) -> str:
        return clip(value, DESCRIPTION_LIMIT)


class DiscordMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str
    embeds: List[Embed] = []

    @field_validator("content")
    @classmethod
    def clip_content(cls, value: str) -> str:
        return clip(value, CONTENT_LIMIT)
