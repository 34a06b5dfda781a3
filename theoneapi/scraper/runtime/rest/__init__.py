"""REST runtime abstractions."""

from .http_client import DEFAULT_RETRY_STATUSES, HTTPClient, HTTPResponse
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner

__all__ = [
    "DEFAULT_RETRY_STATUSES",
    "HTTPClient",
    "HTTPResponse",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
