"""
Credential store protocol.

The client depends on this interface only, so tests can substitute an
in-memory store and applications can pick a durable backend.
"""
from typing import Protocol, Optional, runtime_checkable
from .models import Credential


@runtime_checkable
class CredentialStore(Protocol):
    """
    Async protocol for credential storage implementations.
    
    A store holds at most one credential under a fixed key.
    ``save`` and ``delete`` are the only writers.
    """
    
    async def load(self) -> Optional[Credential]:
        """
        Load the credential.
        
        Returns:
            Credential if one is stored, None otherwise
        """
        ...
    
    async def save(self, credential: Credential) -> None:
        """
        Store the credential, replacing any previous one.
        
        Args:
            credential: Credential to save
        """
        ...
    
    async def delete(self) -> None:
        """Remove the stored credential. No-op when nothing is stored."""
        ...
    
    async def exists(self) -> bool:
        """Check if a credential is stored."""
        ...
    
    async def close(self) -> None:
        """Release storage resources."""
        ...
