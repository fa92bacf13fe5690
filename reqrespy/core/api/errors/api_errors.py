"""HTTP status descriptions and the transport exception."""
from typing import Dict, Optional

from ...exceptions import ReqresException


class HTTPStatusCodes:
    """Status codes the reqres API is known to answer with."""
    
    STATUS_MESSAGES: Dict[int, str] = {
        400: 'Bad Request (400): The request body or parameters were rejected.',
        401: 'Unauthorized (401): The bearer token was missing or rejected.',
        403: 'Forbidden (403): The credential is not allowed to perform this action.',
        404: 'Not Found (404): The requested user does not exist.',
        405: 'Method Not Allowed (405)',
        409: 'Conflict (409)',
        415: 'Unsupported Media Type (415): The body was not sent as JSON.',
        429: 'Too Many Requests (429): Rate limit exceeded, wait before trying again.',
        500: 'Internal Server Error (500): The remote API failed to process the request.',
        502: 'Bad Gateway (502)',
        503: 'Service Unavailable (503): The remote API is temporarily unavailable.',
        504: 'Gateway Timeout (504)',
    }
    
    @classmethod
    def get_message(cls, status: int) -> str:
        """Gets a description for an HTTP status code."""
        return cls.STATUS_MESSAGES.get(status, f"Unexpected HTTP status: {status}")
    
    @staticmethod
    def is_success(status: int) -> bool:
        """True for any 2xx status."""
        return 200 <= status < 300


class ReqresAPIError(ReqresException):
    """
    Exception raised by the transport for any failed call.
    
    ``status`` is the HTTP status when the server answered, including a
    2xx whose body could not be decoded. None for network errors and
    timeouts.
    """
    
    def __init__(self, status: Optional[int] = None, message: Optional[str] = None):
        self.status = status
        if message is None:
            message = HTTPStatusCodes.get_message(status) if status else "Request failed"
        self.message = message
        super().__init__(message, status)
