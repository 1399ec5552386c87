"""
Authentication for the Toggl API Client

Toggl authenticates every request with HTTP Basic Auth. The API token is sent
as the username and the literal ``api_token`` as the password.
"""

from dataclasses import dataclass

from requests.auth import HTTPBasicAuth

from .. import __version__


# Password Toggl expects alongside an API token
API_SECRET = "api_token"
CONTENT_TYPE_JSON = "application/json"
USER_AGENT = f"toggl-client/{__version__}"


@dataclass(frozen=True)
class APIKey:
    """Token/secret pair attached to every request"""
    token: str
    secret: str = API_SECRET

    def __post_init__(self):
        if not self.token:
            raise ValueError("token must be provided")

    def to_auth(self) -> HTTPBasicAuth:
        """Return the requests auth object for this credential"""
        return HTTPBasicAuth(self.token, self.secret)

    def __repr__(self) -> str:
        return f"APIKey(token='{self._mask(self.token)}', secret='{self._mask(self.secret)}')"

    @staticmethod
    def _mask(value: str) -> str:
        if len(value) <= 4:
            return '****'
        return value[:2] + '****' + value[-2:]
