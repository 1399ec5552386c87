"""toggl-client - Toggl REST API Client

A small client for the Toggl time-tracking API: named resources are resolved
to endpoint URLs, requests are sent with Basic Auth and JSON headers, and
responses are decoded into values or structured API errors.
"""

__version__ = "0.1.0"
__author__ = "toggl-client contributors"
__description__ = "Toggl REST API client"

from .api import (
    APIError,
    APIKey,
    DecodeError,
    DecodeResult,
    DuplicateResourceError,
    Endpoint,
    EndpointKind,
    RequestBuildError,
    RequestEncodingError,
    ResourceRegistry,
    TogglClient,
    TransportError,
    UnknownResourceError
)
from .core import TogglError, ConfigurationError

__all__ = [
    "APIError",
    "APIKey",
    "ConfigurationError",
    "DecodeError",
    "DecodeResult",
    "DuplicateResourceError",
    "Endpoint",
    "EndpointKind",
    "RequestBuildError",
    "RequestEncodingError",
    "ResourceRegistry",
    "TogglClient",
    "TogglError",
    "TransportError",
    "UnknownResourceError"
]
