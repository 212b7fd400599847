"""
Pydantic models for the Zendesk connector

Enums carry their wire value explicitly so the serialized form never depends
on member names.
"""
from enum import Enum

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================

class Priority(str, Enum):
    """Zendesk ticket priorities"""
    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class TicketType(str, Enum):
    """Zendesk ticket types"""
    PROBLEM = "problem"
    INCIDENT = "incident"
    QUESTION = "question"
    TASK = "task"


# ============================================================================
# Task Output
# ============================================================================

class CreateTicketOutput(BaseModel):
    """Result of a ticket creation"""
    id: int = Field(..., description="Ticket id")
    url: str = Field(..., description="Ticket URL")
