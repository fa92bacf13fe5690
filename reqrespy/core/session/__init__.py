"""
Credential storage module.

Provides the credential cell the client reads before every gated call.
"""
from .protocols import CredentialStore
from .models import Credential, CREDENTIAL_KEY
from .sqlite_session import SQLiteSession
from .json_session import JSONFileSession
from .memory_session import MemorySession

__all__ = [
    'CredentialStore',
    'Credential',
    'CREDENTIAL_KEY',
    'SQLiteSession',
    'JSONFileSession',
    'MemorySession',
]
