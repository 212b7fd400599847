"""
Zendesk API Client

Sends a single ticket creation request to the Zendesk v2 API:
- One POST per call, no retries
- Authorization from basic (email/token) or bearer (OAuth) credentials
- Only 201 Created counts as success
"""
import httpx
from typing import Optional
from pydantic import ValidationError

from zendesk_connector.config import get_settings
from zendesk_connector.exceptions import MalformedResponse, UnexpectedResponseStatus
from zendesk_connector.models.ticket import TicketRequest, TicketResponse
from zendesk_connector.utils.auth import Credentials
from zendesk_connector.utils.logger import get_logger
from zendesk_connector.utils.urls import tickets_url

settings = get_settings()
logger = get_logger(__name__)

SUCCESS_STATUS = 201


class ZendeskClient:
    """
    Zendesk API integration for ticket creation

    Holds no connection state: every call opens and closes its own
    httpx client.
    """

    def __init__(
        self,
        base_url: str,
        credentials: Credentials,
        timeout: Optional[float] = None
    ):
        self.base_url = base_url
        self.credentials = credentials
        self.timeout = timeout if timeout is not None else settings.zendesk_timeout
        self.headers = {
            "Authorization": credentials.authorization_header(),
            "Content-Type": "application/json; charset=UTF-8"
        }

    async def _make_request(self, body: str) -> str:
        """
        POST a ticket body to the tickets endpoint

        Args:
            body: Serialized TicketRequest

        Returns:
            Response body text

        Raises:
            UnexpectedResponseStatus: If the status is not 201
            httpx.HTTPError: On transport failures (connect errors, timeouts)
        """
        url = tickets_url(self.base_url)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.request(
                method="POST",
                url=url,
                headers=self.headers,
                content=body.encode("utf-8")
            )

        if response.status_code != SUCCESS_STATUS:
            logger.error(f"Ticket creation failed with status {response.status_code}")
            raise UnexpectedResponseStatus(response.status_code, response.text)

        return response.text

    async def create_ticket(self, request: TicketRequest) -> TicketResponse:
        """
        Create a ticket

        Args:
            request: Ticket envelope to send

        Returns:
            Parsed response envelope; unknown fields are ignored

        Raises:
            UnexpectedResponseStatus: If Zendesk does not answer 201
            MalformedResponse: If the body is not a ticket envelope with an id
        """
        logger.info(
            f"Creating ticket on {self.base_url} using {self.credentials.scheme} auth"
        )
        body = await self._make_request(request.to_json())

        try:
            parsed = TicketResponse.model_validate_json(body)
        except ValidationError as e:
            raise MalformedResponse(f"Invalid ticket response: {e}", body=body) from e

        if parsed.ticket.id is None:
            raise MalformedResponse("Ticket response has no id", body=body)

        logger.info(f"Created ticket {parsed.ticket.id}")
        return parsed
