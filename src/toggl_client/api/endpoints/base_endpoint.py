"""
Endpoint types for the Toggl API

An endpoint is one of a fixed set of Toggl API surfaces bound to a concrete
URL. Endpoints are immutable and carry no state beyond that URL.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from urllib.parse import SplitResult, urlsplit


class EndpointKind(Enum):
    """Known Toggl API surfaces with their default URLs"""
    WORKSPACES = "https://www.toggl.com/api/v8/workspaces"
    CLIENTS = "https://www.toggl.com/api/v8/clients"
    REPORT_WEEKLY = "https://toggl.com/reports/api/v2/weekly"
    REPORT_DETAILED = "https://toggl.com/reports/api/v2/details"
    REPORT_SUMMARY = "https://toggl.com/reports/api/v2/summary"
    START_TIME_ENTRY = "https://www.toggl.com/api/v8/time_entries/start"

    @property
    def default_url(self) -> str:
        return self.value


@dataclass(frozen=True)
class Endpoint:
    """
    A Toggl API surface bound to its URL.

    Args:
        kind: Which API surface this endpoint represents
        url_override: URL replacing the kind's Toggl URL
    """
    kind: EndpointKind
    url_override: Optional[str] = field(default=None, repr=False)

    def url_string(self) -> str:
        """Return the endpoint URL as a string"""
        return self.url_override or self.kind.default_url

    def url(self) -> SplitResult:
        """Return the parsed endpoint URL as an immutable SplitResult"""
        return urlsplit(self.url_string())

    @classmethod
    def of(cls, kind: EndpointKind, url: Optional[str] = None) -> 'Endpoint':
        return cls(kind=kind, url_override=url)

    def __repr__(self) -> str:
        return f"Endpoint({self.kind.name}, {self.url_string()!r})"
