"""ULID generation from an injectable clock and randomness source.

Both collaborators are passed in so tests can substitute deterministic ones.
Randomness is drawn fresh on every call; identifiers generated within the
same millisecond are not monotonically incremented.
"""

from __future__ import annotations

import random as _random
import time
from collections.abc import Callable
from typing import Protocol

from ulidkit.errors import InvalidArgumentError
from ulidkit.ulid import MAX_RANDOM_HALF, MAX_TIMESTAMP, Ulid

Clock = Callable[[], int]
"""Zero-argument callable returning milliseconds since the Unix epoch."""

_NANOS_PER_MILLI = 1_000_000
_DRAW_BITS = 64

# SystemRandom reads from os.urandom and keeps no state of its own.
_SYSTEM_RANDOM = _random.SystemRandom()


class RandomSource(Protocol):
    """Anything that can produce uniformly random bits.

    ``random.Random`` and ``random.SystemRandom`` both satisfy this protocol.
    The source must be safe for concurrent use if ``generate`` is called from
    several threads.
    """

    def getrandbits(self, k: int, /) -> int: ...


def system_clock() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // _NANOS_PER_MILLI


def generate(clock: Clock | None = None, random: RandomSource | None = None) -> Ulid:
    """Generate a new Ulid.

    Args:
        clock: Millisecond clock. Defaults to :func:`system_clock`.
        random: Randomness source. Defaults to OS entropy via
            ``random.SystemRandom``.

    Returns:
        A Ulid stamped with the clock's current time and 80 fresh random bits.

    Raises:
        InvalidArgumentError: If the clock returns a value outside 0..2**48-1.
    """
    now = (clock or system_clock)()
    if not isinstance(now, int) or now < 0 or now > MAX_TIMESTAMP:
        msg = f"Clock returned an out-of-range timestamp: {now!r}"
        raise InvalidArgumentError(msg)

    source = random if random is not None else _SYSTEM_RANDOM
    random_hi = source.getrandbits(_DRAW_BITS) & MAX_RANDOM_HALF
    random_lo = source.getrandbits(_DRAW_BITS) & MAX_RANDOM_HALF
    return Ulid(now, random_hi, random_lo)
