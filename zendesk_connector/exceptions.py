"""
Zendesk connector exceptions

Every failure of a ticket creation surfaces as one of these (or as the
transport's own httpx error). Nothing is retried.
"""
from typing import Optional


class ZendeskError(Exception):
    """Base class for connector errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationMissing(ZendeskError):
    """Neither an API token nor an OAuth token is available"""

    def __init__(self, message: str = "Authentication details are missing"):
        super().__init__(message)


class UnexpectedResponseStatus(ZendeskError):
    """Zendesk answered with a status other than 201 Created"""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Failed to create ticket. Response: {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponse(ZendeskError):
    """Response body is not the expected ticket envelope"""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class RenderingFailure(ZendeskError):
    """A dynamic property could not be rendered"""

    def __init__(self, message: str, template: Optional[str] = None):
        super().__init__(message)
        self.template = template
