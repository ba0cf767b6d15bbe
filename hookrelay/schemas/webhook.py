from enum import Enum

from pydantic import BaseModel, ConfigDict


class EventKind(str, Enum):
    REPOSITORY_PUSH = "repo:push"
    PULL_REQUEST_CREATED = "pullrequest:created"
    PULL_REQUEST_MERGED = "pullrequest:merged"
    PULL_REQUEST_DECLINED = "pullrequest:declined"
    REPOSITORY_FORK = "repo:fork"
    UNKNOWN = "unknown"


class ForwardResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    delivered: bool
    status_text: str  # Reason phrase reported by the destination


class RelayResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: int
    message: str  # Plain-text body returned to the webhook sender
