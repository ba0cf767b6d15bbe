import hashlib
import hmac
import json
from typing import Any, Dict, List, Tuple

import httpx
import pytest
from fastapi.testclient import TestClient

from hookrelay.api.deps import get_forwarder
from hookrelay.core.config import Settings, get_settings
from hookrelay.main import app
from hookrelay.services.forwarder import DiscordForwarder

WEBHOOK_SECRET = "test_secret"
DISCORD_URL = "https://discord.test/api/webhooks/123/token"


@pytest.fixture
def webhook_signature():
    """Fixture to sign webhook bodies the way Bitbucket does"""
    def _generate_signature(webhook_secret: str, payload: Dict[str, Any], event_key: str) -> Tuple[Dict[str, str], bytes]:
        payload_bytes = json.dumps(payload).encode()
        signature = hmac.new(
            key=webhook_secret.encode(),
            msg=payload_bytes,
            digestmod=hashlib.sha256
        ).hexdigest()

        headers = {
            "X-Event-Key": event_key,
            "X-Hub-Signature": f"sha256={signature}",
            "Content-Type": "application/json",
        }

        return headers, payload_bytes

    return _generate_signature


@pytest.fixture
def discord_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def discord_status():
    """Status code the fake Discord answers with; tests may override"""
    return 204


@pytest.fixture
def discord_client(discord_requests, discord_status):
    def _handler(request: httpx.Request) -> httpx.Response:
        discord_requests.append(request)
        return httpx.Response(status_code=discord_status)

    return httpx.AsyncClient(transport=httpx.MockTransport(_handler))


@pytest.fixture
def settings(request):
    values = {"BITBUCKET_KEY": WEBHOOK_SECRET, "DISCORD_URL": DISCORD_URL}
    values.update(getattr(request, "param", {}))
    return Settings(**values)


@pytest.fixture
def client(settings, discord_client):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_forwarder] = lambda: DiscordForwarder(http_client=discord_client)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def push_payload():
    return {
        "actor": {"display_name": "Ada Lovelace"},
        "repository": {
            "full_name": "team/engine",
            "links": {"html": {"href": "https://bitbucket.org/team/engine"}},
        },
        "push": {
            "changes": [
                {
                    "new": {"name": "main", "type": "branch"},
                    "commits": [
                        {
                            "hash": "a1b2c3",
                            "message": "fix bug\n",
                            "links": {"html": {"href": "https://bitbucket.org/team/engine/commits/a1b2c3"}},
                        },
                        {
                            "hash": "d4e5f6",
                            "message": "",
                            "links": {"html": {"href": "https://bitbucket.org/team/engine/commits/d4e5f6"}},
                        },
                    ],
                }
            ]
        },
    }


@pytest.fixture
def pull_request_payload():
    return {
        "actor": {"display_name": "Ada Lovelace"},
        "repository": {
            "full_name": "team/engine",
            "links": {"html": {"href": "https://bitbucket.org/team/engine"}},
        },
        "pullrequest": {
            "id": 7,
            "title": "Add analytical engine",
            "author": {"display_name": "Ada Lovelace"},
            "links": {"html": {"href": "https://bitbucket.org/team/engine/pull-requests/7"}},
            "source": {"branch": {"name": "feature/x"}},
            "destination": {"branch": {"name": "main"}},
        },
    }


@pytest.fixture
def fork_payload():
    return {
        "actor": {"display_name": "Charles Babbage"},
        "repository": {
            "full_name": "team/engine",
            "links": {"html": {"href": "https://bitbucket.org/team/engine"}},
        },
        "fork": {
            "full_name": "charles/engine",
            "links": {"html": {"href": "https://bitbucket.org/charles/engine"}},
        },
    }
