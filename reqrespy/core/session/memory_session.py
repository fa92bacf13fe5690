"""
In-memory credential storage.

Non-persistent storage for testing and temporary use.
"""
from typing import Optional

from .protocols import CredentialStore
from .models import Credential


class MemorySession(CredentialStore):
    """
    In-memory credential storage.
    
    Data is lost when the object is destroyed.
    
    Example:
        >>> store = MemorySession()
        >>> await store.save(Credential("token"))
        >>> loaded = await store.load()
    """
    
    def __init__(self, credential: Optional[Credential] = None):
        self._data: Optional[Credential] = credential
    
    async def load(self) -> Optional[Credential]:
        return self._data
    
    async def save(self, credential: Credential) -> None:
        credential.update_timestamp()
        self._data = credential
    
    async def delete(self) -> None:
        self._data = None
    
    async def exists(self) -> bool:
        return self._data is not None
    
    async def close(self) -> None:
        """Close storage (no-op for memory storage)."""
        pass
    
    async def __aenter__(self) -> 'MemorySession':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
