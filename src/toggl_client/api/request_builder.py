"""
Request Builder for the Toggl API Client

Turns (method, resource name, optional body) into an authenticated
``requests.PreparedRequest`` carrying the client's fixed headers.
"""

import json
from typing import Any, Dict, IO, Optional, Union

import requests
from requests.exceptions import InvalidSchema, InvalidURL, MissingSchema

from ..core.error_handler import ErrorSeverity, TogglError
from ..core.logging_manager import LoggingManager
from .authentication import APIKey, CONTENT_TYPE_JSON, USER_AGENT
from .registry import ResourceRegistry


RequestBody = Union[bytes, str, IO[bytes], None]


class RequestBuildError(TogglError):
    """Raised when a request cannot be constructed"""
    severity = ErrorSeverity.HIGH


class RequestEncodingError(RequestBuildError):
    """Raised when a request payload cannot be serialized to JSON"""
    pass


def encode_json(payload: Any) -> bytes:
    """Serialize a request payload as a UTF-8 JSON document"""
    try:
        return json.dumps(payload, separators=(',', ':'), ensure_ascii=False).encode('utf-8')
    except (TypeError, ValueError) as e:
        raise RequestEncodingError(f"Failed to serialize JSON data: {e}") from e


class RequestBuilder:
    """
    Builds authenticated requests for registered resources.

    Every request gets Basic Auth from the credential, the client's
    User-Agent and a JSON Content-Type.
    """

    def __init__(
        self,
        registry: ResourceRegistry,
        api_key: APIKey,
        content_type: str = CONTENT_TYPE_JSON,
        user_agent: str = USER_AGENT
    ):
        self.registry = registry
        self.api_key = api_key
        self.content_type = content_type
        self.user_agent = user_agent
        self.logger = LoggingManager.get_logger(__name__)

    @property
    def default_headers(self) -> Dict[str, str]:
        return {
            'User-Agent': self.user_agent,
            'Content-Type': self.content_type
        }

    def build_request(
        self,
        method: str,
        name: str,
        body: RequestBody = None,
        payload: Any = None
    ) -> requests.PreparedRequest:
        """
        Build an authenticated request for a registered resource

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, ...)
            name: Registered resource name
            body: Raw request body, sent as given
            payload: JSON-serializable object, encoded as the body

        Returns:
            Prepared request ready to be sent

        Raises:
            UnknownResourceError: If the resource is not registered
            RequestEncodingError: If the payload cannot be encoded
            RequestBuildError: If the request cannot be constructed
        """
        if body is not None and payload is not None:
            raise RequestBuildError("Pass either a raw body or a payload, not both")

        url = self.registry.get_endpoint(name).url_string()

        if payload is not None:
            body = encode_json(payload)

        request = requests.Request(
            method=method.upper(),
            url=url,
            data=body,
            headers=self.default_headers,
            auth=self.api_key.to_auth()
        )

        try:
            prepared = request.prepare()
        except (InvalidURL, MissingSchema, InvalidSchema) as e:
            raise RequestBuildError(f"Invalid URL for resource '{name}': {e}") from e

        self.logger.debug(f"Built {prepared.method} request for '{name}': {self._sanitize_for_logging(prepared.headers)}")
        return prepared

    def _sanitize_for_logging(self, headers) -> Dict[str, str]:
        """Mask credentials before headers reach the log"""
        sanitized = dict(headers)
        for key in list(sanitized.keys()):
            if key.lower() in ('authorization', 'cookie'):
                sanitized[key] = '[MASKED]'
        return sanitized
