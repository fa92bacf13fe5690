"""
Token providers.

The OAuth consent flow happens outside this package (a browser redirect,
a device-code prompt, a test fixture). A provider only has to return the
resulting access token; the client stores it verbatim without validating
or exchanging it.
"""
import os
from typing import Protocol, Optional, runtime_checkable

from ..exceptions import ReqresAuthError


@runtime_checkable
class TokenProvider(Protocol):
    """Produces an access token, possibly after user interaction."""
    
    async def fetch_access_token(self) -> str:
        """
        Run the provider flow.
        
        Returns:
            The access token
            
        Raises:
            ReqresAuthError: If no token could be obtained
        """
        ...


class StaticTokenProvider(TokenProvider):
    """Returns a token obtained elsewhere (pasted by the user, a fixture)."""
    
    def __init__(self, token: str):
        self._token = token
    
    async def fetch_access_token(self) -> str:
        if not self._token:
            raise ReqresAuthError("No access token supplied")
        return self._token


class EnvTokenProvider(TokenProvider):
    """Reads the access token from an environment variable."""
    
    DEFAULT_VARIABLE = 'REQRES_ACCESS_TOKEN'
    
    def __init__(self, variable: Optional[str] = None):
        self.variable = variable or self.DEFAULT_VARIABLE
    
    async def fetch_access_token(self) -> str:
        token = os.environ.get(self.variable, '').strip()
        if not token:
            raise ReqresAuthError(f"Environment variable {self.variable} is not set")
        return token
