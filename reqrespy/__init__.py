"""
reqrespy - Async, session-gated client for the reqres.in user API.

Usage:
    >>> from reqrespy import UsersClient, AuthRequired
    >>> 
    >>> async with UsersClient("session") as client:
    ...     await client.login("access-token-from-oauth")
    ...     users = await client.list_users(1)
    ...     for user in users:
    ...         print(user)
"""
import logging
from .client import UsersClient, SessionGatedClient

# Results
from .core.results import AuthRequired, RequestFailed, Success, is_failure

# Models
from .core.users import UserRecord, UserPage, UserUpdate

# Configuration
from .core.api import (
    APIConfig,
    TimeoutConfig,
    RetryConfig,
    AsyncAPIClient,
    ReqresAPIError,
)

# Credential storage
from .core.session import (
    CredentialStore,
    Credential,
    SQLiteSession,
    JSONFileSession,
    MemorySession
)

# Login
from .core.auth import TokenProvider, StaticTokenProvider, EnvTokenProvider

from .core.exceptions import ReqresException, ReqresAuthError, ReqresDecodeError

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for reqrespy modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'reqrespy',
        'reqrespy.client',
        'reqrespy.api',
        'reqrespy.session',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'UsersClient',
    'SessionGatedClient',  # Alias
    'AuthRequired',
    'RequestFailed',
    'Success',
    'is_failure',
    'UserRecord',
    'UserPage',
    'UserUpdate',
    'CredentialStore',
    'Credential',
    'SQLiteSession',
    'JSONFileSession',
    'MemorySession',
    'TokenProvider',
    'StaticTokenProvider',
    'EnvTokenProvider',
    'APIConfig',
    'TimeoutConfig',
    'RetryConfig',
    'AsyncAPIClient',
    'ReqresAPIError',
    'ReqresException',
    'ReqresAuthError',
    'ReqresDecodeError',
    'setup_logging',
]
