"""
HTTP Client for the Toggl API

Composes the resource registry, request builder and response handler into
the public client. Each call is one synchronous request/response cycle with
no retries.
"""

from typing import TYPE_CHECKING, Any, Optional, Type

import requests
from pydantic import BaseModel
from requests.exceptions import RequestException

from ..core.error_handler import ConfigurationError, ErrorSeverity, TogglError
from ..core.logging_manager import LoggingManager
from .authentication import APIKey, CONTENT_TYPE_JSON, USER_AGENT
from .registry import ResourceRegistry
from .request_builder import RequestBody, RequestBuilder
from .response_handler import ResponseHandler

if TYPE_CHECKING:
    from ..core.config_manager import AppConfig


class TransportError(TogglError):
    """Raised when the HTTP exchange itself fails (connection, DNS, timeout)"""
    severity = ErrorSeverity.HIGH


class TogglClient:
    """
    Client for the Toggl REST API.

    The registry is shared with the caller, who may keep registering
    resources until the first request. The credential is owned by the
    client. Failures are raised in pipeline order: resource resolution,
    request construction, transport, then API status.
    """

    def __init__(
        self,
        api_key: APIKey,
        registry: ResourceRegistry,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        user_agent: str = USER_AGENT,
        verify_ssl: bool = True
    ):
        """
        Initialize the client

        Args:
            api_key: Credential used for Basic Auth on every request
            registry: Resource registry, shared with the caller
            session: Optional transport session, a new one is created if omitted
            timeout: Request timeout in seconds, None uses the transport default
            user_agent: User-Agent header value
            verify_ssl: Whether to verify SSL certificates
        """
        if api_key is None:
            raise ValueError("api_key must be provided")
        if registry is None:
            raise ValueError("registry must be provided")

        self.api_key = api_key
        self.registry = registry
        self.content_type = CONTENT_TYPE_JSON
        self.user_agent = user_agent
        self.timeout = timeout
        self.verify_ssl = verify_ssl

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

        self.request_builder = RequestBuilder(
            registry,
            api_key,
            content_type=self.content_type,
            user_agent=self.user_agent
        )
        self.response_handler = ResponseHandler()
        self.logger = LoggingManager.get_logger(__name__)

    @classmethod
    def from_config(
        cls,
        config: 'AppConfig',
        registry: Optional[ResourceRegistry] = None,
        session: Optional[requests.Session] = None
    ) -> 'TogglClient':
        """Build a client from loaded configuration.

        Without a registry, the standard Toggl resources are registered with
        the configured URL overrides.

        Raises:
            ConfigurationError: If no API token is configured
        """
        api_config = config.api
        if api_config.token is None or not api_config.token.get_secret_value():
            raise ConfigurationError("No API token configured (set api.token or TOGGL_API_TOKEN)")

        api_key = APIKey(
            token=api_config.token.get_secret_value(),
            secret=api_config.secret.get_secret_value()
        )
        if registry is None:
            registry = ResourceRegistry.with_defaults(config.endpoints)

        return cls(
            api_key,
            registry,
            session=session,
            timeout=api_config.timeout,
            user_agent=api_config.user_agent,
            verify_ssl=api_config.verify_ssl
        )

    def build_request(
        self,
        method: str,
        name: str,
        body: RequestBody = None,
        payload: Any = None
    ) -> requests.PreparedRequest:
        """Build an authenticated request for a registered resource"""
        return self.request_builder.build_request(method, name, body=body, payload=payload)

    def send(
        self,
        prepared: requests.PreparedRequest,
        response_model: Optional[Type[BaseModel]] = None,
        expect_payload: bool = True
    ) -> Any:
        """
        Send a prepared request and decode its response

        Raises:
            TransportError: If the request could not be completed
            APIError: If the API answered with a non-200 status
            DecodeError: If the success body could not be decoded
        """
        self.logger.debug(f"Making {prepared.method} request to {prepared.url}")

        try:
            response = self.session.send(
                prepared,
                timeout=self.timeout,
                verify=self.verify_ssl
            )
        except RequestException as e:
            raise TransportError(f"{prepared.method} {prepared.url} failed: {e}") from e

        self.logger.debug(f"Received {response.status_code} from {prepared.url}")
        return self.response_handler.handle(
            response,
            response_model=response_model,
            expect_payload=expect_payload
        )

    def request(
        self,
        method: str,
        name: str,
        body: RequestBody = None,
        payload: Any = None,
        response_model: Optional[Type[BaseModel]] = None,
        expect_payload: bool = True
    ) -> Any:
        """
        Make an authenticated request against a registered resource

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            name: Registered resource name
            body: Raw request body
            payload: JSON-serializable request payload
            response_model: Optional pydantic model for the response body
            expect_payload: When False the response body is not decoded

        Returns:
            Decoded response body, a ``response_model`` instance, or None
        """
        prepared = self.build_request(method, name, body=body, payload=payload)
        return self.send(prepared, response_model=response_model, expect_payload=expect_payload)

    def get_request(self, name: str) -> None:
        """Send a GET request for a resource without decoding the body"""
        self.request('GET', name, expect_payload=False)

    def get(self, name: str, response_model: Optional[Type[BaseModel]] = None) -> Any:
        """Make GET request"""
        return self.request('GET', name, response_model=response_model)

    def post(self, name: str, payload: Any = None, response_model: Optional[Type[BaseModel]] = None) -> Any:
        """Make POST request"""
        return self.request('POST', name, payload=payload, response_model=response_model)

    def put(self, name: str, payload: Any = None, response_model: Optional[Type[BaseModel]] = None) -> Any:
        """Make PUT request"""
        return self.request('PUT', name, payload=payload, response_model=response_model)

    def delete(self, name: str, expect_payload: bool = False) -> Any:
        """Make DELETE request"""
        return self.request('DELETE', name, expect_payload=expect_payload)

    def close(self):
        """Close the session if this client created it"""
        if self._owns_session:
            self.session.close()
            self.logger.debug("HTTP client session closed")

    def __enter__(self) -> 'TogglClient':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
