"""
Tagged results of gated operations.

Gated client calls return one of these instead of raising, so callers can
branch on the outcome: ``AuthRequired`` means "send the user to login",
``RequestFailed`` means "show a failure message". Both are falsy.
"""
from dataclasses import dataclass
from typing import Any, Optional

from .api.errors import ReqresAPIError


@dataclass(frozen=True)
class AuthRequired:
    """No credential was stored; no request was sent."""
    reason: str = "No credential stored, login required"
    
    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class RequestFailed:
    """
    The call was attempted and failed.
    
    Attributes:
        message: Human-readable description
        status: HTTP status of the response, also set when its body was not
            valid JSON. None for network errors, timeouts and records that
            failed model decoding
        error: Underlying exception, if any
    """
    message: str
    status: Optional[int] = None
    error: Optional[Exception] = None
    
    def __bool__(self) -> bool:
        return False
    
    @classmethod
    def from_error(cls, error: Exception) -> 'RequestFailed':
        if isinstance(error, ReqresAPIError):
            return cls(message=error.message, status=error.status, error=error)
        return cls(message=str(error) or type(error).__name__, error=error)


@dataclass(frozen=True)
class Success:
    """The remote accepted the write with a 2xx status."""
    status: int = 200
    
    def __bool__(self) -> bool:
        return True


def is_failure(result: Any) -> bool:
    """True for AuthRequired and RequestFailed."""
    return isinstance(result, (AuthRequired, RequestFailed))
