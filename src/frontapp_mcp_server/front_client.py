"""
Front API client.

Performs authenticated requests against the Front REST API, composes
conversation search queries, and fans out message fetches across the
conversations of an inbox.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel

from frontapp_mcp_server.config import DEFAULT_BASE_URL, ConfigurationError, FrontConfig
from frontapp_mcp_server.models import (
    ConversationPage,
    ConversationQuery,
    ConversationStatus,
    InboxMessages,
    MessagePage,
)

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")
BODY_METHODS = ("POST", "PUT", "PATCH")

ModelT = TypeVar("ModelT", bound=BaseModel)


class FrontAPIError(Exception):
    """Raised when the Front API answers with a non-success status."""

    def __init__(self, status_code: int, reason_phrase: str, body: Any):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body
        super().__init__(
            f"Front API request failed: {status_code} {reason_phrase} - "
            f"{json.dumps(body, separators=(',', ':'))}"
        )


def build_conversation_query(params: ConversationQuery) -> str:
    """
    Encode a conversation filter as a query string.

    Scalar filters are sent under their own names. A status filter is folded
    into ``q`` using Front's search syntax, joined to any free-text query
    with `` AND ``; it is never sent as a separate parameter.

    Returns:
        The encoded query string, without a leading ``?``.
    """
    query: List[Tuple[str, str]] = []

    if params.q:
        query.append(("q", params.q))
    if params.page_token:
        query.append(("page_token", params.page_token))
    if params.limit:
        query.append(("limit", str(params.limit)))
    if params.start:
        query.append(("start", params.start))
    if params.end:
        query.append(("end", params.end))

    if params.status:
        status_query = f'status:"{ConversationStatus(params.status).value}"'
        if params.q:
            query = [
                (key, f"{value} AND {status_query}" if key == "q" else value)
                for key, value in query
            ]
        else:
            query.append(("q", status_query))

    return urlencode(query)


class FrontClient:
    """Client for the Front API holding a bearer token and base URL."""

    def __init__(
        self,
        token: Optional[str],
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            token: Front API bearer token
            base_url: Endpoint prefix, defaults to the production API
            timeout: Timeout handed to the HTTP transport
            transport: Optional httpx transport, used by tests

        Raises:
            ConfigurationError: If no token is given
        """
        if not token:
            raise ConfigurationError(
                "Front API token not provided and not found in environment variable: "
                "FRONT_API_TOKEN"
            )
        self._token = token
        self.base_url = base_url or DEFAULT_BASE_URL
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(
        cls, config: FrontConfig, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "FrontClient":
        """Create a client from loaded configuration."""
        return cls(
            token=config.api_token,
            base_url=config.base_url,
            timeout=config.request_timeout_s,
            transport=transport,
        )

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def request(self, method: str, path: str, data: Any = None) -> Any:
        """
        Send a request to the Front API and return the parsed JSON body.

        Args:
            method: One of GET, POST, PUT, PATCH, DELETE
            path: API path, including any query string
            data: Optional JSON body, sent only for POST, PUT and PATCH

        Raises:
            FrontAPIError: On a non-success HTTP status
            httpx.RequestError: On network failures, unchanged
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = f"{self.base_url}{path}"
        body = data if data and method in BODY_METHODS else None

        logger.debug("Front → %s %s", method, path)
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport, follow_redirects=True
        ) as client:
            response = await client.request(method, url, headers=self._headers(), json=body)

        if not response.is_success:
            try:
                error_body = response.json()
            except ValueError:
                error_body = {}
            logger.warning(
                "Front ← %s %s failed with %d %s",
                method,
                path,
                response.status_code,
                response.reason_phrase,
            )
            raise FrontAPIError(response.status_code, response.reason_phrase, error_body)

        return response.json()

    async def _get_model(self, path: str, model: Type[ModelT]) -> ModelT:
        return model.model_validate(await self.request("GET", path))

    async def list_inbox_conversations(
        self, inbox_id: str, params: Optional[ConversationQuery] = None
    ) -> ConversationPage:
        """
        Retrieve one page of conversations from an inbox.

        Args:
            inbox_id: ID of the inbox
            params: Filter for the conversations

        Returns:
            ConversationPage with pagination info and the conversations
        """
        query_string = build_conversation_query(params or ConversationQuery())
        path = f"/inboxes/{quote(inbox_id, safe='')}/conversations"
        if query_string:
            path = f"{path}?{query_string}"
        return await self._get_model(path, ConversationPage)

    async def list_conversation_messages(self, conversation_id: str) -> MessagePage:
        """Retrieve one page of messages in a conversation, in API order."""
        path = f"/conversations/{quote(conversation_id, safe='')}/messages"
        return await self._get_model(path, MessagePage)

    async def list_inbox_messages(
        self, inbox_id: str, params: Optional[ConversationQuery] = None
    ) -> InboxMessages:
        """
        Retrieve conversations from an inbox along with all of their messages.

        Unresolved-only filters always query ``open`` conversations. Message
        pages are fetched concurrently and flattened in conversation order.
        Any failing request fails the whole call.

        Args:
            inbox_id: ID of the inbox
            params: Filter for the conversations

        Returns:
            InboxMessages with the conversations and their messages
        """
        params = params or ConversationQuery()
        if params.only_unresolved:
            params = params.model_copy(update={"status": ConversationStatus.OPEN})

        conversations = await self.list_inbox_conversations(inbox_id, params)
        logger.info(
            f"Fetching messages for {len(conversations.results)} conversations in {inbox_id}"
        )

        message_pages = await asyncio.gather(
            *(self.list_conversation_messages(c.id) for c in conversations.results)
        )

        return InboxMessages(
            conversations=conversations.results,
            messages=[message for page in message_pages for message in page.results],
        )
