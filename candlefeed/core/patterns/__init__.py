"""Execution patterns used around provider calls."""

from candlefeed.core.patterns.rate_limiter import RateLimitConfig, RateLimitedQueue, TaskQueue

__all__ = ["RateLimitConfig", "RateLimitedQueue", "TaskQueue"]
