"""
Zendesk URL helpers
"""

TICKETS_PATH = "/api/v2/tickets.json"
TICKET_PATH_FORMAT = "/api/v2/tickets/{ticket_id}.json"


def normalize_domain(raw: str) -> str:
    """
    Normalize a Zendesk domain into a base URL

    Values that already carry an http(s) scheme keep it and lose one trailing
    slash. Bare hosts get https:// prepended as-is. Host syntax is not checked.

    Args:
        raw: Domain or URL (e.g. "acme.zendesk.com", "https://acme.zendesk.com/")

    Returns:
        Base URL without trailing slash
    """
    if raw.startswith("http://") or raw.startswith("https://"):
        if raw.endswith("/"):
            return raw[:-1]
        return raw

    return f"https://{raw}"


def tickets_url(base_url: str) -> str:
    """Ticket creation endpoint for a normalized base URL"""
    return f"{base_url}{TICKETS_PATH}"


def ticket_url(base_url: str, ticket_id: int) -> str:
    """API URL of a single ticket, used when the server omits it"""
    return f"{base_url}{TICKET_PATH_FORMAT.format(ticket_id=ticket_id)}"
