"""
API Endpoints Package for the Toggl API Client

Contains the endpoint type and the standard Toggl resource set.
"""

from .base_endpoint import Endpoint, EndpointKind
from .toggl_endpoints import (
    DEFAULT_RESOURCES,
    WORKSPACES,
    CLIENTS,
    REPORT_WEEKLY,
    REPORT_DETAILED,
    REPORT_SUMMARY,
    START_TIME_ENTRY
)

__all__ = [
    'Endpoint',
    'EndpointKind',
    'DEFAULT_RESOURCES',
    'WORKSPACES',
    'CLIENTS',
    'REPORT_WEEKLY',
    'REPORT_DETAILED',
    'REPORT_SUMMARY',
    'START_TIME_ENTRY'
]
