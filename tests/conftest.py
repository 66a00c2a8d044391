"""Pytest configuration and fixtures for Front MCP Server tests."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from frontapp_mcp_server.config import FrontConfig
from frontapp_mcp_server.front_client import FrontClient

TEST_TOKEN = "test-token"


class FakeFront:
    """In-memory stand-in for the Front API, served through httpx.MockTransport."""

    def __init__(self):
        self.conversations: Dict[str, List[Dict[str, Any]]] = {}
        self.messages: Dict[str, List[Dict[str, Any]]] = {}
        self.failures: Dict[str, httpx.Response] = {}
        self.delays: Dict[str, float] = {}
        self.requests: List[httpx.Request] = []
        self.in_flight = 0
        self.max_in_flight = 0

    def add_conversation(self, inbox_id: str, conversation_id: str, messages: List[Dict[str, Any]]):
        self.conversations.setdefault(inbox_id, []).append(
            {"id": conversation_id, "subject": f"Subject {conversation_id}", "status": "open"}
        )
        self.messages[conversation_id] = messages

    def fail(self, path: str, status_code: int, body: Optional[Any] = None):
        content = json.dumps(body).encode() if body is not None else b"not json"
        self.failures[path] = httpx.Response(status_code, content=content)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(request.url.path, 0))
            return self._respond(request)
        finally:
            self.in_flight -= 1

    def _respond(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path in self.failures:
            return self.failures[path]

        parts = path.strip("/").split("/")
        if len(parts) == 3 and parts[0] == "inboxes" and parts[2] == "conversations":
            results = self.conversations.get(parts[1], [])
            limit = int(request.url.params.get("limit", 100))
            return _envelope(results[:limit])
        if len(parts) == 3 and parts[0] == "conversations" and parts[2] == "messages":
            return _envelope(self.messages.get(parts[1], []))
        return httpx.Response(404, json={"message": "not found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def _envelope(results: List[Dict[str, Any]]) -> httpx.Response:
    return httpx.Response(
        200,
        json={"_pagination": {"next": None}, "_links": {"self": "https://api2.frontapp.com"}, "_results": results},
    )


def make_message(message_id: str, created_at: float = 1700000000, inbound: bool = True) -> Dict[str, Any]:
    """Build a Front message record."""
    return {
        "id": message_id,
        "type": "email",
        "is_inbound": inbound,
        "created_at": created_at,
        "blurb": f"Blurb {message_id}",
        "body": f"<p>Body {message_id}</p>",
        "text": f"Body {message_id}",
    }


@pytest.fixture
def fake_front():
    """Fake Front API with an empty inbox."""
    return FakeFront()


@pytest.fixture
def front_client(fake_front):
    """Front client wired to the fake API."""
    return FrontClient(TEST_TOKEN, transport=fake_front.transport)


@pytest.fixture
def front_config():
    """Configuration with a token and default inbox."""
    return FrontConfig(api_token=TEST_TOKEN, default_inbox_id="inb_default")
