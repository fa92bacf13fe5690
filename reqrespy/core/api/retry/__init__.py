"""Retry strategies."""
from .retry_strategy import RetryStrategy, NoRetryStrategy, ExponentialBackoffStrategy

__all__ = ['RetryStrategy', 'NoRetryStrategy', 'ExponentialBackoffStrategy']
