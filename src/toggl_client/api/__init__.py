"""
Toggl API Client Package

Resource registry, request builder, response handler and the client that
composes them.
"""

from .authentication import APIKey, API_SECRET, CONTENT_TYPE_JSON, USER_AGENT
from .endpoints import Endpoint, EndpointKind
from .registry import ResourceRegistry, DuplicateResourceError, UnknownResourceError
from .request_builder import RequestBuilder, RequestBuildError, RequestEncodingError, encode_json
from .response_handler import ResponseHandler, DecodeResult, APIError, DecodeError
from .client import TogglClient, TransportError

__all__ = [
    'APIKey',
    'API_SECRET',
    'CONTENT_TYPE_JSON',
    'USER_AGENT',
    'Endpoint',
    'EndpointKind',
    'ResourceRegistry',
    'DuplicateResourceError',
    'UnknownResourceError',
    'RequestBuilder',
    'RequestBuildError',
    'RequestEncodingError',
    'encode_json',
    'ResponseHandler',
    'DecodeResult',
    'APIError',
    'DecodeError',
    'TogglClient',
    'TransportError'
]
