"""Retry strategies using Strategy Pattern."""
import asyncio
from abc import ABC, abstractmethod
from typing import Optional

from ..config import RetryConfig


class RetryStrategy(ABC):
    """Abstract retry strategy."""
    
    @abstractmethod
    def should_retry(self, status: Optional[int], retry_count: int) -> bool:
        """Determines if request should be retried.
        
        ``status`` is None for network errors and timeouts.
        """
        pass
    
    @abstractmethod
    async def wait_async(self, retry_count: int):
        """Waits before retry (async)."""
        pass


class NoRetryStrategy(RetryStrategy):
    """Single attempt per call."""
    
    def should_retry(self, status: Optional[int], retry_count: int) -> bool:
        return False
    
    async def wait_async(self, retry_count: int):
        pass


class ExponentialBackoffStrategy(RetryStrategy):
    """Exponential backoff driven by a RetryConfig."""
    
    def __init__(self, config: RetryConfig):
        self.config = config
    
    def should_retry(self, status: Optional[int], retry_count: int) -> bool:
        """Retries network errors and the configured statuses."""
        if retry_count >= self.config.max_retries:
            return False
        return self.config.is_retryable(status)
    
    async def wait_async(self, retry_count: int):
        """Waits with exponential backoff (async)."""
        await asyncio.sleep(self.config.calculate_delay(retry_count))
    
    @classmethod
    def from_config(cls, config: RetryConfig) -> RetryStrategy:
        """Picks NoRetryStrategy when retries are disabled."""
        if not config.enabled:
            return NoRetryStrategy()
        return cls(config)
