"""
Create Zendesk Ticket task

Flow for one run:
1. Render the domain and normalize it into a base URL
2. Map the ticket properties onto the wire Ticket
3. Resolve credentials (API token first, OAuth token second)
4. POST the ticket and map the response onto {id, url}

Example workflow step:
    - id: create_ticket
      type: zendesk.tickets.Create
      domain: mycompany.zendesk.com
      username: my_email@example.com
      token: "{{ secret('ZENDESK_TOKEN') }}"
      subject: "Increased 5xx in Demo Service"
      priority: NORMAL
      ticketType: INCIDENT
      assigneeId: 1
      tags:
        - bug
        - workflow
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from zendesk_connector.config import get_settings
from zendesk_connector.models.schemas import CreateTicketOutput, Priority, TicketType
from zendesk_connector.models.ticket import Ticket, TicketRequest, TicketResponse
from zendesk_connector.services.zendesk import ZendeskClient
from zendesk_connector.tasks.context import RunContext
from zendesk_connector.utils.auth import resolve_credentials
from zendesk_connector.utils.logger import get_logger
from zendesk_connector.utils.urls import normalize_domain, ticket_url

logger = get_logger(__name__)


class CreateTicket(BaseModel):
    """Open a new ticket in Zendesk"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Connection
    domain: str = Field(..., min_length=1, description="Zendesk domain url")
    username: Optional[str] = Field(None, description="Zendesk username")
    token: Optional[str] = Field(None, description="Zendesk api token")
    oauth_token: Optional[str] = Field(
        None,
        alias="oauthToken",
        description="Zendesk oauth token, if api token and username is not provided"
    )
    timeout: Optional[float] = Field(None, gt=0, description="Request timeout in seconds")

    # Ticket
    subject: Optional[str] = Field(None, description="Ticket subject")
    description: Optional[str] = Field(None, description="Ticket description")
    priority: Optional[Union[Priority, str]] = Field(
        None, description="Priority: URGENT, HIGH, NORMAL or LOW"
    )
    ticket_type: Optional[Union[TicketType, str]] = Field(
        None, alias="ticketType", description="Ticket type: PROBLEM, INCIDENT, QUESTION or TASK"
    )
    assignee_id: Optional[Union[int, str]] = Field(None, alias="assigneeId", description="Id of assignee")
    tags: List[str] = Field(default_factory=list, description="List of tags for ticket")

    @classmethod
    def from_settings(cls, **properties) -> "CreateTicket":
        """
        Build a task, filling unset connection properties from settings

        Args:
            **properties: Task properties (field names or aliases)

        Returns:
            CreateTicket instance
        """
        settings = get_settings()
        defaults = {
            "domain": settings.zendesk_domain,
            "username": settings.zendesk_username or None,
            "token": settings.zendesk_token or None,
            "oauth_token": settings.zendesk_oauth_token or None,
        }
        aliases = {"oauthToken": "oauth_token"}
        given = {aliases.get(key, key) for key in properties}
        for key, value in defaults.items():
            if key not in given:
                properties[key] = value
        return cls(**properties)

    def build_ticket(self, run_context: RunContext) -> Ticket:
        """Render properties into the outgoing Ticket"""
        return Ticket(
            subject=run_context.render(self.subject),
            description=run_context.render(self.description),
            priority=run_context.render_as(self.priority, Priority),
            type=run_context.render_as(self.ticket_type, TicketType),
            assignee_id=run_context.render_as(self.assignee_id, int),
            tags=run_context.render(self.tags) or []
        )

    @staticmethod
    def extract_output(response: TicketResponse, base_url: str) -> CreateTicketOutput:
        """Map the created ticket onto the task output"""
        ticket = response.ticket
        url = ticket.url if ticket.url is not None else ticket_url(base_url, ticket.id)
        return CreateTicketOutput(id=ticket.id, url=url)

    async def run(self, run_context: RunContext) -> CreateTicketOutput:
        """
        Create the ticket

        Args:
            run_context: Renders dynamic properties

        Returns:
            Created ticket id and url

        Raises:
            RenderingFailure: If a property cannot be rendered
            AuthenticationMissing: If no token or OAuth token is set
            UnexpectedResponseStatus: If Zendesk does not answer 201
            MalformedResponse: If the response is not a ticket envelope
        """
        base_url = normalize_domain(run_context.render(self.domain))
        ticket = self.build_ticket(run_context)

        credentials = resolve_credentials(
            username=run_context.render(self.username),
            token=run_context.render(self.token),
            oauth_token=run_context.render(self.oauth_token)
        )

        client = ZendeskClient(base_url, credentials, timeout=self.timeout)
        response = await client.create_ticket(TicketRequest(ticket=ticket))

        output = self.extract_output(response, base_url)
        logger.info(f"Ticket {output.id} available at {output.url}")
        return output
