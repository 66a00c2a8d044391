"""
Pydantic models and schemas for the Front API and MCP tools.

This module defines the query filter, the envelopes returned by Front,
and the input/output models for tools, ensuring validation happens
before any request is issued.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConversationStatus(str, Enum):
    """Conversation statuses understood by Front's search syntax."""

    OPEN = "open"
    ARCHIVED = "archived"
    DELETED = "deleted"
    SPAM = "spam"


class ToolName(str, Enum):
    """Enumeration of all available tools."""

    GET_CONVERSATIONS = "getConversations"
    HEALTH_CHECK = "front_health_check"


# Query filter


class ConversationQuery(BaseModel):
    """Filter for listing conversations in an inbox."""

    model_config = ConfigDict(frozen=True)

    q: Optional[str] = Field(default=None, description="Free-text search query")
    page_token: Optional[str] = Field(default=None, description="Pagination token")
    limit: int = Field(default=10, ge=1, le=100, description="Max conversations (1-100)")
    start: Optional[str] = Field(default=None, description="Lower time bound")
    end: Optional[str] = Field(default=None, description="Upper time bound")
    status: Optional[ConversationStatus] = Field(
        default=None, description="Filter conversations by status"
    )
    only_unresolved: bool = Field(
        default=False, description="Only open conversations; overrides status"
    )


# Front API envelopes


class Pagination(BaseModel):
    """Pagination block of a Front list response."""

    model_config = ConfigDict(extra="allow")

    next: Optional[str] = None


class Conversation(BaseModel):
    """A Front conversation. Fields beyond these are kept but not interpreted."""

    model_config = ConfigDict(extra="allow")

    id: str
    subject: Optional[str] = None
    status: Optional[str] = None


class Message(BaseModel):
    """A Front message."""

    model_config = ConfigDict(extra="allow")

    id: str
    type: Optional[str] = None
    is_inbound: bool = False
    created_at: float
    blurb: Optional[str] = None
    body: Optional[str] = None
    text: Optional[str] = None


class ConversationPage(BaseModel):
    """One page of conversations."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    pagination: Pagination = Field(default_factory=Pagination, alias="_pagination")
    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")
    results: List[Conversation] = Field(default_factory=list, alias="_results")


class MessagePage(BaseModel):
    """One page of messages in a conversation."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    pagination: Pagination = Field(default_factory=Pagination, alias="_pagination")
    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")
    results: List[Message] = Field(default_factory=list, alias="_results")


class InboxMessages(BaseModel):
    """Conversations page paired with the flattened messages of every conversation."""

    conversations: List[Conversation] = Field(default_factory=list)
    messages: List[Message] = Field(default_factory=list)


# Tool models


class GetConversationsInput(BaseModel):
    """Input for the getConversations tool."""

    model_config = ConfigDict(populate_by_name=True)

    inbox_id: Optional[str] = Field(
        default=None,
        alias="inboxId",
        description="Front Inbox ID (uses DEFAULT_INBOX_ID env var if not provided)",
    )
    limit: int = Field(default=10, ge=1, le=100, description="Number of messages to get (max 100)")
    query: Optional[str] = Field(default=None, description="Optional search query")
    only_unresolved: bool = Field(
        default=False,
        alias="onlyUnresolved",
        description="Only retrieve unresolved/open conversations",
    )
    status: Optional[ConversationStatus] = Field(
        default=None, description="Filter conversations by status"
    )

    def to_query(self) -> ConversationQuery:
        """Build the conversation filter for this tool call."""
        return ConversationQuery(
            q=self.query or None,
            limit=self.limit,
            status=None if self.only_unresolved else self.status,
            only_unresolved=self.only_unresolved,
        )


class MessageSummary(BaseModel):
    """Compact message representation returned to the agent."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: Optional[str] = None
    is_inbound: bool = Field(alias="isInbound")
    created_at: str = Field(alias="createdAt", description="ISO-8601 UTC timestamp")
    text: Optional[str] = None
    blurb: Optional[str] = None


class GetConversationsOutput(BaseModel):
    """Output for the getConversations tool."""

    conversations: int = Field(description="Number of conversations in the page")
    messages: List[MessageSummary] = Field(default_factory=list)
