"""reqres API module."""
from .errors import ReqresAPIError, HTTPStatusCodes
from .config import APIConfig, TimeoutConfig, RetryConfig, DEFAULT_BASE_URL, API_KEY_HEADER
from .retry import RetryStrategy, NoRetryStrategy, ExponentialBackoffStrategy
from .async_client import AsyncAPIClient, APIResponse

__all__ = [
    'AsyncAPIClient',
    'APIResponse',
    
    # Configuration
    'APIConfig',
    'DEFAULT_BASE_URL',
    'API_KEY_HEADER',
    'TimeoutConfig',
    'RetryConfig',
    
    # Retry
    'RetryStrategy',
    'NoRetryStrategy',
    'ExponentialBackoffStrategy',
    
    # Errors
    'ReqresAPIError',
    'HTTPStatusCodes',
]
