"""
Zendesk Connector - create Zendesk tickets from workflow tasks
"""
__version__ = "1.0.0"
