"""
Zendesk ticket wire models

Both requests and responses wrap the ticket in a {"ticket": {...}} envelope.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from zendesk_connector.models.schemas import Priority, TicketType


class Ticket(BaseModel):
    """
    Zendesk ticket

    id and url are assigned by Zendesk and never written to a request.
    Unset subject/description/priority/type are sent as null, an unset
    assignee_id is left out of the payload.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = Field(None, exclude=True)
    url: Optional[str] = Field(None, exclude=True)
    subject: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    type: Optional[TicketType] = None
    assignee_id: Optional[int] = None
    tags: List[str] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def omit_missing_assignee(self, handler) -> Dict[str, Any]:
        data = handler(self)
        if data.get("assignee_id") is None:
            data.pop("assignee_id", None)
        return data


class TicketRequest(BaseModel):
    """Ticket creation request envelope"""
    ticket: Ticket

    def to_json(self) -> str:
        """Serialize to the request body"""
        return self.model_dump_json()


class CreatedTicket(BaseModel):
    """
    Ticket as returned by Zendesk

    Priority and type stay plain strings so values outside the request enums
    do not reject an otherwise successful response.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    url: Optional[str] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    type: Optional[str] = None
    assignee_id: Optional[int] = None
    tags: List[str] = Field(default_factory=list)


class TicketResponse(BaseModel):
    """Ticket creation response envelope"""
    model_config = ConfigDict(extra="ignore")

    ticket: CreatedTicket
    audit: Optional[Dict[str, Any]] = None
