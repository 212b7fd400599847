"""
Pydantic models for the Zendesk connector
"""

from zendesk_connector.models.schemas import (
    Priority,
    TicketType,
    CreateTicketOutput,
)
from zendesk_connector.models.ticket import (
    Ticket,
    CreatedTicket,
    TicketRequest,
    TicketResponse,
)

__all__ = [
    # Enums
    "Priority",
    "TicketType",

    # Wire Models
    "Ticket",
    "CreatedTicket",
    "TicketRequest",
    "TicketResponse",

    # Task Output
    "CreateTicketOutput",
]
