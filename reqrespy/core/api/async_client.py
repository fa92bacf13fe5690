"""
Async reqres API client.

Bearer-authenticated HTTP transport built on aiohttp. Every failure is
raised as ReqresAPIError; mapping failures to results happens one layer up.
"""
import json
import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Any
import aiohttp

from .config import APIConfig
from .errors import ReqresAPIError, HTTPStatusCodes
from .retry import RetryStrategy, ExponentialBackoffStrategy
from ..logging import get_logger


@dataclass
class APIResponse:
    """Status and decoded body of a successful call."""
    status: int
    data: Any = None


class AsyncAPIClient:
    """
    Asynchronous reqres API client.
    
    Features:
    - Full async/await support
    - Configurable proxy, SSL, timeouts
    - Optional retry with exponential backoff
    - Injectable aiohttp session (tests substitute a mock)
    
    Example:
        >>> async with AsyncAPIClient() as api:
        ...     response = await api.get('users', token='abc', params={'page': 1})
        ...     print(response.data['data'])
    """
    
    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
        retry_strategy: Optional[RetryStrategy] = None
    ):
        """
        Initialize async API client.
        
        Args:
            config: API configuration (uses defaults if not provided)
            session: Existing aiohttp session; not closed by this client
            retry_strategy: Overrides the strategy built from config.retry
        """
        self._config = config or APIConfig.default()
        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None
        self._retry = retry_strategy or ExponentialBackoffStrategy.from_config(self._config.retry)
        self._closed = False
        
        self._logger = get_logger('reqrespy.api')
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)
    
    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config
    
    @property
    def closed(self) -> bool:
        return self._closed
    
    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session
    
    async def close(self):
        """Close client and release resources."""
        self._closed = True
        
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
    
    async def request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
        decode: bool = True,
        retry_count: int = 0
    ) -> APIResponse:
        """
        Make an async request to the reqres API.
        
        Args:
            method: HTTP method
            path: Resource path relative to config.base_url (e.g. 'users/2')
            token: Bearer token for the Authorization header
            params: Query string parameters
            body: JSON body; serialized compactly
            decode: Parse the response body as JSON
            retry_count: Current retry attempt (internal use)
            
        Returns:
            APIResponse with status and decoded body (None when decode=False)
            
        Raises:
            ReqresAPIError: Non-2xx status, network error, timeout or bad JSON
        """
        if self._closed:
            raise ReqresAPIError(None, "Client is closed")
        
        session = await self._ensure_session()
        url = self._config.url_for(path)
        headers = self._config.request_headers(token, body is not None)
        data = json.dumps(body, separators=(',', ':')) if body is not None else None
        
        self._logger.debug(f"{method} {url} params={params}")
        if data:
            self._logger.debug(f"Request data: {data}")
        
        try:
            async with session.request(
                method,
                url,
                params=params,
                data=data,
                headers=headers,
                **self._config.request_options()
            ) as response:
                status = response.status
                raw = await response.read()
                self._logger.debug(f"Response {status}: {raw[:1000]!r}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self._logger.error(f"Network error on {method} {url}: {e!r}")
            
            if self._retry.should_retry(None, retry_count):
                self._logger.warning(f"Retrying {method} {url}, attempt {retry_count + 1}")
                await self._retry.wait_async(retry_count)
                return await self.request(
                    method, path, token=token, params=params, body=body,
                    decode=decode, retry_count=retry_count + 1
                )
            
            raise ReqresAPIError(None, f"Network error: {e!r}") from e
        
        if not HTTPStatusCodes.is_success(status):
            if self._retry.should_retry(status, retry_count):
                self._logger.warning(
                    f"Retrying {method} {url} after status {status}, attempt {retry_count + 1}"
                )
                await self._retry.wait_async(retry_count)
                return await self.request(
                    method, path, token=token, params=params, body=body,
                    decode=decode, retry_count=retry_count + 1
                )
            
            self._logger.warning(f"{method} {url} failed with status {status}")
            raise ReqresAPIError(status)
        
        if not decode:
            return APIResponse(status=status)
        
        return APIResponse(status=status, data=self._parse_response(raw, status))
    
    def _parse_response(self, raw: bytes, status: int) -> Any:
        """Decode a UTF-8 JSON response body."""
        try:
            return json.loads(raw.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ReqresAPIError(status, f"Invalid JSON in response: {e}") from e
    
    # Convenience methods
    
    async def get(self, path: str, **kwargs) -> APIResponse:
        return await self.request('GET', path, **kwargs)
    
    async def put(self, path: str, body: Dict[str, Any], **kwargs) -> APIResponse:
        return await self.request('PUT', path, body=body, decode=False, **kwargs)
    
    async def delete(self, path: str, **kwargs) -> APIResponse:
        return await self.request('DELETE', path, decode=False, **kwargs)
