"""
Resource Registry for the Toggl API Client

Maps logical resource names (e.g. ``"workspaces"``) to endpoints. The registry
is filled by the embedding application before any request is issued and is
only read by the client afterwards.
"""

from typing import Dict, Iterator, List, Mapping, Optional
from urllib.parse import SplitResult

from ..core.error_handler import ErrorSeverity, TogglError
from ..core.logging_manager import LoggingManager
from .endpoints.base_endpoint import Endpoint
from .endpoints.toggl_endpoints import DEFAULT_RESOURCES


class DuplicateResourceError(TogglError):
    """Raised when a resource name is registered twice"""
    severity = ErrorSeverity.HIGH

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is already used.")


class UnknownResourceError(TogglError, LookupError):
    """Raised when a resource name has not been registered"""
    severity = ErrorSeverity.HIGH

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is not registered as a resource.")


class ResourceRegistry:
    """
    Name-keyed collection of endpoints.

    Registration never overwrites. Lookups of unregistered names fail, the
    registry never creates entries implicitly. Concurrent registration is not
    synchronized; finish setup before sharing the registry between threads.
    """

    def __init__(self):
        self._endpoints: Dict[str, Endpoint] = {}
        self.logger = LoggingManager.get_logger(__name__)

    @classmethod
    def with_defaults(cls, overrides: Optional[Mapping[str, str]] = None) -> 'ResourceRegistry':
        """Build a registry holding every standard Toggl resource.

        Args:
            overrides: Resource name -> URL replacing the default Toggl URL

        Raises:
            UnknownResourceError: If an override names a non-standard resource
        """
        overrides = dict(overrides or {})
        for name in overrides:
            if name not in DEFAULT_RESOURCES:
                raise UnknownResourceError(name)

        registry = cls()
        for name, kind in DEFAULT_RESOURCES.items():
            registry.add_endpoint(name, Endpoint.of(kind, overrides.get(name)))
        return registry

    def add_endpoint(self, name: str, endpoint: Endpoint):
        """Register an endpoint under a resource name.

        Raises:
            DuplicateResourceError: If the name is already registered
        """
        if name in self._endpoints:
            raise DuplicateResourceError(name)
        self._endpoints[name] = endpoint
        self.logger.debug(f"Registered resource '{name}' -> {endpoint.url_string()}")

    def get_endpoint(self, name: str) -> Endpoint:
        try:
            return self._endpoints[name]
        except KeyError:
            raise UnknownResourceError(name) from None

    def get_url(self, name: str) -> SplitResult:
        """Resolve a resource name to its parsed URL.

        Raises:
            UnknownResourceError: If the name is not registered
        """
        return self.get_endpoint(name).url()

    def names(self) -> List[str]:
        return list(self._endpoints)

    def __contains__(self, name: object) -> bool:
        return name in self._endpoints

    def __len__(self) -> int:
        return len(self._endpoints)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._endpoints))
