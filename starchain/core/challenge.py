"""
Challenge messages used to prove possession of an address
"""

import re
import time
from typing import Callable

from ..config.env import CHALLENGE_DOMAIN, CHALLENGE_WINDOW_SECONDS
from .exceptions import ExpiredChallenge, MalformedChallenge


def current_time() -> int:
    """Wall-clock time in whole seconds"""
    return int(time.time())


def build_challenge(address: str, timestamp: int, domain: str = CHALLENGE_DOMAIN) -> str:
    return f"{address}:{timestamp}:{domain}"


def parse_challenge_time(message: str) -> int:
    """Extract the timestamp from the second field of a challenge message"""
    parts = message.split(':') if isinstance(message, str) else []
    if len(parts) < 3:
        raise MalformedChallenge(f"Malformed challenge message: {message!r}")
    if not re.fullmatch(r"-?[0-9]+", parts[1]):
        raise MalformedChallenge(f"Invalid timestamp in challenge message: {parts[1]!r}")
    return int(parts[1])


def check_freshness(
    message: str,
    window: int = CHALLENGE_WINDOW_SECONDS,
    clock: Callable[[], int] = current_time
) -> int:
    """Raise ExpiredChallenge when the message is ``window`` seconds old or more.

    Returns the age of the message in seconds.
    """
    message_time = parse_challenge_time(message)
    elapsed = clock() - message_time
    if elapsed >= window:
        raise ExpiredChallenge(f"Request timed out: challenge is {elapsed}s old (limit {window}s)")
    return elapsed
