"""
Ticket-related API routes
"""
import httpx
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

from zendesk_connector.exceptions import (
    AuthenticationMissing,
    MalformedResponse,
    RenderingFailure,
    UnexpectedResponseStatus,
)
from zendesk_connector.models.schemas import CreateTicketOutput
from zendesk_connector.tasks import CreateTicket, RunContext
from zendesk_connector.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/tickets", tags=["tickets"])


class CreateTicketRequest(BaseModel):
    """Task properties plus the values its templates may reference"""
    task: CreateTicket
    variables: Dict[str, Any] = Field(default_factory=dict)
    secrets: Optional[Dict[str, str]] = None


@router.post("", response_model=CreateTicketOutput, status_code=status.HTTP_201_CREATED)
async def create_ticket(request: CreateTicketRequest) -> CreateTicketOutput:
    """
    Create a Zendesk ticket

    Errors:
        401: No API token or OAuth token
        422: A property could not be rendered
        502: Zendesk rejected the ticket, answered with an unreadable body or was unreachable
        504: Zendesk did not answer in time
    """
    run_context = RunContext(variables=request.variables, secrets=request.secrets)

    try:
        return await request.task.run(run_context)
    except AuthenticationMissing as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except RenderingFailure as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message)
    except (UnexpectedResponseStatus, MalformedResponse) as e:
        logger.error(f"Zendesk ticket creation failed: {e.message}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    except httpx.TimeoutException as e:
        logger.error(f"Zendesk request timed out: {e}")
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=f"Zendesk request timed out: {e}")
    except httpx.HTTPError as e:
        logger.error(f"Zendesk request failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"Zendesk request failed: {e}")
