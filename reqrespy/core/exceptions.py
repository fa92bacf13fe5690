"""
Custom exceptions for reqrespy.

Gated client operations never raise these for transport problems; they are
converted into tagged results. The exceptions surface from the lower layers
and from the non-gated helpers (login, decoding, configuration).
"""
from typing import Optional, Any


class ReqresException(Exception):
    """Base exception for all reqrespy errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Numeric error code, usually an HTTP status (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class ReqresAuthError(ReqresException, ValueError):
    """Raised when a credential cannot be obtained or is unusable."""
    pass


class ReqresDecodeError(ReqresException):
    """Raised when a response payload does not have the expected shape."""
    
    def __init__(
        self,
        message: str,
        payload: Any = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            payload: Offending payload (if available)
            error_code: Numeric error code (if available)
        """
        self.payload = payload
        super().__init__(message, error_code)
