"""
Workflow tasks
"""
from .context import RunContext
from .create import CreateTicket

__all__ = [
    "RunContext",
    "CreateTicket",
]
