import pytest

from hookrelay.schemas.webhook import EventKind
from hookrelay.services.classifier import classify


@pytest.mark.parametrize(
    "event_key, kind",
    [
        ("repo:push", EventKind.REPOSITORY_PUSH),
        ("pullrequest:created", EventKind.PULL_REQUEST_CREATED),
        ("pullrequest:merged", EventKind.PULL_REQUEST_MERGED),
        ("pullrequest:declined", EventKind.PULL_REQUEST_DECLINED),
        ("repo:fork", EventKind.REPOSITORY_FORK),
    ],
)
def test_known_event_keys(event_key, kind):
    assert classify(event_key) is kind


@pytest.mark.parametrize(
    "event_key",
    [
        None,
        "",
        "unknown",
        "REPO:PUSH",
        "repo:push ",
        "repo:pus",
        "pullrequest:updated",
        "repo:updated",
        "issue:created",
    ],
)
def test_unrecognized_event_keys_are_unknown(event_key):
    assert classify(event_key) is EventKind.UNKNOWN
