"""Retry policy for Blueair API calls."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from pyblueair.const import DEFAULT_RETRIES, DEFAULT_RETRY_DELAY
from pyblueair.exceptions import RetriesExhaustedError


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


@dataclass
class RetryConfig:
    """Configuration for the fixed-delay retry loop.

    Attributes:
        retries: Maximum number of attempts (default 3).
        delay: Seconds to wait between failed attempts (default 1.0).
    """

    retries: int = DEFAULT_RETRIES
    delay: float = DEFAULT_RETRY_DELAY


class RetryingRequestExecutor:
    """Run an async operation with a bounded number of attempts.

    The executor does not classify failures on its own. Callers keep terminal
    failures out of the loop by validating before calling execute(), or by
    narrowing retryable_exceptions. Anything else raised by the operation,
    including HTTP 401 mapped to AuthInvalidError, is retried until the
    attempt budget is spent.

    Example:
        executor = RetryingRequestExecutor(retries=3, delay=1.0)

        async def fetch() -> list[Device]:
            ...

        devices = await executor.execute(fetch)
    """

    def __init__(self, retries: int = DEFAULT_RETRIES, delay: float = DEFAULT_RETRY_DELAY) -> None:
        """Initialize the executor.

        Args:
            retries: Default maximum number of attempts.
            delay: Default seconds to wait between failed attempts.
        """
        self.config = RetryConfig(retries=retries, delay=delay)

    @property
    def retries(self) -> int:
        """Get default number of attempts."""
        return self.config.retries

    @property
    def delay(self) -> float:
        """Get default delay between attempts in seconds."""
        return self.config.delay

    async def execute(
        self,
        func: Callable[[], Awaitable[_T]],
        *,
        retries: int | None = None,
        delay: float | None = None,
        retryable_exceptions: tuple[type[Exception], ...] = (Exception,),
    ) -> _T:
        """Execute func, retrying failed attempts after a fixed delay.

        Args:
            func: Async callable performing one attempt.
            retries: Maximum number of attempts. Defaults to the executor's setting.
            delay: Seconds between attempts. Defaults to the executor's setting.
            retryable_exceptions: Exception types that trigger another attempt.
                Other exceptions propagate immediately.

        Returns:
            Result of the first successful attempt.

        Raises:
            Exception: The last attempt's exception, unchanged.
            RetriesExhaustedError: If retries is less than 1.
        """
        max_attempts = self.config.retries if retries is None else retries
        wait = self.config.delay if delay is None else delay

        for attempt in range(1, max_attempts + 1):
            try:
                return await func()
            except retryable_exceptions as exc:
                if attempt < max_attempts:
                    _LOGGER.warning(
                        "Attempt %d/%d failed: %s. Retrying in %.1f seconds",
                        attempt,
                        max_attempts,
                        exc,
                        wait,
                    )
                    await asyncio.sleep(wait)
                else:
                    _LOGGER.error("All %d attempts failed: %s", max_attempts, exc)
                    raise

        raise RetriesExhaustedError
