"""
Business Logic Services
"""
from .zendesk import ZendeskClient

__all__ = [
    "ZendeskClient",
]
