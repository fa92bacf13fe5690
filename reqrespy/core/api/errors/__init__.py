"""reqres API errors and exceptions."""
from .api_errors import ReqresAPIError, HTTPStatusCodes

__all__ = [
    'ReqresAPIError',
    'HTTPStatusCodes',
]
