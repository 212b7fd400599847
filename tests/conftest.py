"""
Pytest configuration and fixtures
"""
import json
import pytest
from typing import Any, Dict
from unittest.mock import MagicMock

from zendesk_connector.tasks import CreateTicket, RunContext


@pytest.fixture
def run_context() -> RunContext:
    """Run context with a few workflow variables and secrets"""
    return RunContext(
        variables={"execution": {"id": "exec-42"}, "flow": "billing"},
        secrets={"ZENDESK_TOKEN": "secret-token", "ZENDESK_OAUTH_TOKEN": "oauth-xyz"}
    )


@pytest.fixture
def task_properties() -> Dict[str, Any]:
    """Properties of a typical ticket creation step"""
    return {
        "domain": "acme.zendesk.com",
        "username": "agent@acme.com",
        "token": "api-token",
        "subject": "Increased 5xx in Demo Service",
        "description": "The number of 5xx has increased beyond the threshold.",
        "priority": "NORMAL",
        "ticketType": "INCIDENT",
        "assigneeId": 1,
        "tags": ["bug", "workflow"],
    }


@pytest.fixture
def create_task(task_properties) -> CreateTicket:
    """CreateTicket task built from task_properties"""
    return CreateTicket(**task_properties)


@pytest.fixture
def make_response():
    """Factory for mock httpx responses"""
    def _make(status_code: int, body: Any) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.text = body if isinstance(body, str) else json.dumps(body)
        return response
    return _make
