"""
Response Handler for the Toggl API Client

Maps HTTP responses to decoded values or structured API errors. Only status
200 counts as success. Any other status is reported as an ``APIError``, taken
from the Toggl error envelope when the body carries one and synthesized from
the status line otherwise.
"""

from dataclasses import dataclass
from typing import Any, Optional, Type

import requests
from pydantic import BaseModel, ValidationError
from requests.exceptions import JSONDecodeError

from ..core.error_handler import TogglError
from ..core.logging_manager import LoggingManager


class DecodeError(TogglError):
    """Raised when a success body is not the JSON that was expected"""
    pass


class APIError(TogglError):
    """Failure reported by the Toggl API, or synthesized from the HTTP status"""

    def __init__(self, code: int, message: str):
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return f"APIError(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))


class ErrorBody(BaseModel):
    """The ``error`` member of the Toggl error envelope"""
    code: int
    message: str


class ErrorEnvelope(BaseModel):
    """``{"error": {"code": ..., "message": ...}}``"""
    error: ErrorBody


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding a response: either a value or an API error"""
    value: Any = None
    error: Optional[APIError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the decoded value, raising the API error if there is one"""
        if self.error is not None:
            raise self.error
        return self.value


class ResponseHandler:
    """
    Decodes Toggl API responses.

    Features:
    - JSON decoding into plain data or a pydantic model
    - Explicit "no payload expected" mode that skips decoding
    - Structured errors from the Toggl error envelope
    - Status-line fallback when the error body is not an envelope
    """

    SUCCESS_STATUS = 200

    def __init__(self):
        self.logger = LoggingManager.get_logger(__name__)

    def decode(
        self,
        response: requests.Response,
        response_model: Optional[Type[BaseModel]] = None,
        expect_payload: bool = True
    ) -> DecodeResult:
        """
        Decode a completed response

        Args:
            response: Response returned by the transport
            response_model: Optional pydantic model to validate the body into
            expect_payload: When False a success body is not decoded at all

        Returns:
            DecodeResult holding the value on success or the APIError otherwise

        Raises:
            DecodeError: If a success body is not valid JSON or does not
                match ``response_model``
        """
        if response.status_code != self.SUCCESS_STATUS:
            error = self._parse_error_envelope(response)
            if error is None:
                error = self._error_from_status(response)
            self.logger.debug(f"Received error {error.code} from {response.url}")
            return DecodeResult(error=error)

        if not expect_payload:
            return DecodeResult(value=None)

        return DecodeResult(value=self._decode_body(response, response_model))

    def handle(
        self,
        response: requests.Response,
        response_model: Optional[Type[BaseModel]] = None,
        expect_payload: bool = True
    ) -> Any:
        """Decode a response and return its value, raising APIError on failure"""
        return self.decode(response, response_model, expect_payload).unwrap()

    def _decode_body(self, response: requests.Response, response_model: Optional[Type[BaseModel]]) -> Any:
        try:
            data = response.json()
        except (JSONDecodeError, ValueError) as e:
            raise DecodeError(f"Invalid JSON response: {e}") from e

        if response_model is None:
            return data

        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            raise DecodeError(
                f"Response does not match {response_model.__name__}: {e}"
            ) from e

    def _parse_error_envelope(self, response: requests.Response) -> Optional[APIError]:
        """Return the envelope's error, or None when the body is not an envelope"""
        try:
            envelope = ErrorEnvelope.model_validate_json(response.content)
        except ValidationError:
            return None
        return APIError(envelope.error.code, envelope.error.message)

    def _error_from_status(self, response: requests.Response) -> APIError:
        status_line = f"{response.status_code} {response.reason or ''}".strip()
        return APIError(response.status_code, status_line)
