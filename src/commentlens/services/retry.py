"""Retry policy shared by the outbound HTTP calls."""

from tenacity import Retrying, stop_after_attempt, wait_exponential


def retrying(attempts: int = 1) -> Retrying:
    """Build a tenacity policy; one attempt means the call is never retried."""
    return Retrying(
        stop=stop_after_attempt(max(1, int(attempts))),
        wait=wait_exponential(multiplier=1.0, max=10),
        reraise=True,
    )
