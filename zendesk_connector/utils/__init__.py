"""
Utility functions
"""
from zendesk_connector.utils.logger import setup_logger, get_logger
from zendesk_connector.utils.urls import normalize_domain, tickets_url, ticket_url
from zendesk_connector.utils.auth import (
    BasicCredentials,
    BearerCredentials,
    resolve_credentials,
    build_authorization_header
)

__all__ = [
    "setup_logger",
    "get_logger",
    "normalize_domain",
    "tickets_url",
    "ticket_url",
    "BasicCredentials",
    "BearerCredentials",
    "resolve_credentials",
    "build_authorization_header",
]
