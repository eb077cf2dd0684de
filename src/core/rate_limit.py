"""Rate limiting logic - Pure functions.

This module throttles feed refreshes with a fixed-window counter. The
limiter is an explicit value object: callers own its lifetime, pass it in
together with the current time, and get a new state back. Nothing here
reads the clock. All functions are pure with no side effects.
"""

from dataclasses import dataclass, replace


DEFAULT_MAX_REQUESTS = 5
DEFAULT_WINDOW_SECONDS = 60.0


@dataclass(frozen=True)
class RateLimitState:
    """Fixed-window request counter.

    Attributes:
        count: Requests consumed in the current window
        window_start: Start of the current window (seconds since epoch)
        limit: Maximum requests per window
        window_seconds: Window duration in seconds
    """
    count: int
    window_start: float
    limit: int = DEFAULT_MAX_REQUESTS
    window_seconds: float = DEFAULT_WINDOW_SECONDS

    @property
    def window_end(self) -> float:
        """Time at which the current window resets."""
        return self.window_start + self.window_seconds


@dataclass(frozen=True)
class RateLimitResult:
    """Result of checking and consuming the rate limit.

    Attributes:
        allowed: Whether the request is allowed
        reset_in: Seconds until the current window resets
        state: Updated limiter state to use for the next call
    """
    allowed: bool
    reset_in: float
    state: RateLimitState


def new_rate_limit_state(
    now: float,
    limit: int = DEFAULT_MAX_REQUESTS,
    window_seconds: float = DEFAULT_WINDOW_SECONDS,
) -> RateLimitState:
    """Create an empty limiter whose window starts at ``now``.

    Pure function.
    """
    return RateLimitState(
        count=0,
        window_start=now,
        limit=limit,
        window_seconds=window_seconds,
    )


def check_and_consume(state: RateLimitState, now: float) -> RateLimitResult:
    """Check whether a request is allowed and consume one slot if so.

    Pure function - returns new state without modifying input.

    The window restarts at ``now`` once ``now`` is strictly past the
    window end. A rejected request does not change the count.

    Args:
        state: Current limiter state
        now: Current time (seconds since epoch)

    Returns:
        RateLimitResult with the decision and the new state
    """
    current = state
    if now > state.window_end:
        current = replace(state, count=0, window_start=now)

    reset_in = current.window_end - now

    if current.count < current.limit:
        return RateLimitResult(
            allowed=True,
            reset_in=reset_in,
            state=replace(current, count=current.count + 1),
        )

    return RateLimitResult(
        allowed=False,
        reset_in=reset_in,
        state=current,
    )


def remaining_requests(state: RateLimitState, now: float) -> int:
    """Requests still available at ``now`` without consuming any.

    Pure function.
    """
    if now > state.window_end:
        return state.limit
    return max(state.limit - state.count, 0)


def format_rate_limit_message(result: RateLimitResult) -> str:
    """Format a rejected request into a human-readable message.

    Pure function. Returns an empty string for allowed requests.
    """
    if result.allowed:
        return ""

    return (
        f"Rate limit reached: {result.state.count}/{result.state.limit} requests, "
        f"resets in {result.reset_in:.0f}s"
    )
