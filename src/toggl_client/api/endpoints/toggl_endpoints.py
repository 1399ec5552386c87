"""
Standard Toggl resources

Resource names used by the command line and by
``ResourceRegistry.with_defaults`` for the workspace, client, report and time
entry APIs.
"""

from typing import Dict

from .base_endpoint import EndpointKind


WORKSPACES = "workspaces"
CLIENTS = "clients"
REPORT_WEEKLY = "report_weekly"
REPORT_DETAILED = "report_detailed"
REPORT_SUMMARY = "report_summary"
START_TIME_ENTRY = "start_time_entry"

DEFAULT_RESOURCES: Dict[str, EndpointKind] = {
    WORKSPACES: EndpointKind.WORKSPACES,
    CLIENTS: EndpointKind.CLIENTS,
    REPORT_WEEKLY: EndpointKind.REPORT_WEEKLY,
    REPORT_DETAILED: EndpointKind.REPORT_DETAILED,
    REPORT_SUMMARY: EndpointKind.REPORT_SUMMARY,
    START_TIME_ENTRY: EndpointKind.START_TIME_ENTRY,
}
