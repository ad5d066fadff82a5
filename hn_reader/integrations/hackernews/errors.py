"""Error types for the Hacker News API client.

Every failure of a single request falls into one of three kinds:

- TransportError: the request never produced a response (DNS, connect, timeout)
- ProtocolError: the server answered with a non-2xx status
- DecodeError: the body is not JSON or does not match the expected shape

The client does not raise these; it returns them inside a FetchResult.
"""

import time
from typing import Optional


class HackerNewsError(Exception):
    """Base exception for Hacker News API errors."""

    def __init__(self, message: str, url: Optional[str] = None, **context):
        """Initialize error with request context.

        Args:
            message: Error message
            url: URL of the request that failed
            **context: Additional context information
        """
        super().__init__(message)
        self.url = url
        self.context = context
        self.timestamp = time.time()

    def __str__(self):
        """String representation with URL if available."""
        base = super().__str__()
        if self.url:
            return f"[{self.url}] {base}"
        return base


class TransportError(HackerNewsError):
    """Connection, DNS or timeout failure during a GET."""

    pass


class ProtocolError(HackerNewsError):
    """Non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        url: Optional[str] = None,
        **context,
    ):
        """Initialize protocol error.

        Args:
            message: Error message
            status_code: HTTP status code returned by the server
            url: URL of the request that failed
            **context: Additional context
        """
        super().__init__(message, url, **context)
        self.status_code = status_code


class DecodeError(HackerNewsError):
    """Response body is not valid JSON or does not match the expected shape."""

    pass
