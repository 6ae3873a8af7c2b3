"""
Exception types raised by the football adapter client.

Every error keeps the lower-level failure on ``cause`` (and on
``__cause__`` when raised with ``from``) so callers can inspect what
actually went wrong, and ``operation`` names the endpoint method that
was running when it happened.
"""
import copy
from typing import Optional


class FootballAdapterError(Exception):
    """Base class for every client error"""

    def __init__(self, message: str, operation: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.cause = cause

    def __str__(self):
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message

    def wrap(self, message: str, operation: Optional[str] = None) -> 'FootballAdapterError':
        """
        Return a copy of this error with extra operation context

        The copy has the same class and attributes (status code, body, ...),
        a new message and this error as its cause.
        """
        wrapped = copy.copy(self)
        wrapped.args = (message,)
        wrapped.message = message
        wrapped.operation = operation or self.operation
        wrapped.cause = self
        return wrapped


class ConfigurationError(FootballAdapterError):
    """Invalid construction input, e.g. an empty base URL"""


class SerializationError(FootballAdapterError):
    """A request payload could not be converted to JSON"""


class DecodeError(FootballAdapterError):
    """Response bytes did not match the expected response shape"""

    def __init__(self, message: str, operation: Optional[str] = None,
                 cause: Optional[BaseException] = None, body: bytes = b''):
        super().__init__(message, operation=operation, cause=cause)
        self.body = body


class TransportError(FootballAdapterError):
    """The request could not be sent or the response could not be read"""

    def __init__(self, message: str, operation: Optional[str] = None,
                 cause: Optional[BaseException] = None,
                 status_code: Optional[int] = None, body: Optional[bytes] = None):
        super().__init__(message, operation=operation, cause=cause)
        self.status_code = status_code
        self.body = body


class HTTPStatusError(TransportError):
    """The adapter answered with a non-2xx status"""

    def __str__(self):
        text = super().__str__()
        if self.cause is None and self.body:
            text = f"{text}: {self.body[:200].decode('utf-8', errors='replace')}"
        return text
