"""
Timestamp distribution sampling.

Walks a time range in fixed steps and emits a per-step number of events,
either a fixed rate or Poisson-distributed around it, each jittered inside
its step. The result is a bursty, realistic arrival sequence rather than
one evenly spaced timestamp per unit.
"""

import logging
import math
from datetime import datetime
from enum import Enum

from ..shared.metrics import record_degraded
from ..shared.models import TimeRange
from .date_formats import from_epoch_millis, to_epoch_millis
from .random_source import RandomSource

logger = logging.getLogger(__name__)

# Knuth's method underflows for large means; larger means are summed in chunks
_POISSON_CHUNK = 500.0


class Granularity(str, Enum):
    """Step size of the timestamp walk."""

    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def step_millis(self) -> int:
        return {"hour": 3_600_000, "minute": 60_000, "second": 1_000}[self.value]


class Distribution(str, Enum):
    """Per-step event count model."""

    UNIFORM = "uniform"
    POISSON = "poisson"


def poisson_sample(rng: RandomSource, mean: float) -> int:
    """
    Poisson-distributed count with the given mean.

    Multiplies uniform draws until the product drops below ``e**-mean``.
    Means above 500 are split into chunks (a sum of independent Poisson
    variables is Poisson with the summed mean).
    """
    if mean <= 0:
        return 0

    total = 0
    remaining = mean
    while remaining > 0:
        chunk = min(remaining, _POISSON_CHUNK)
        remaining -= chunk

        threshold = math.exp(-chunk)
        k = 0
        p = 1.0
        while p > threshold:
            k += 1
            p *= rng.random()
        total += k - 1

    return total


def estimate_timestamp_count(
    time_range: TimeRange,
    granularity: Granularity | str,
    rate: float,
    distribution: Distribution | str = Distribution.UNIFORM,
) -> float:
    """
    Number of timestamps ``sample_timestamps`` will produce, without sampling.

    Exact for UNIFORM, the expected value for POISSON.
    """
    granularity = Granularity(granularity)
    distribution = Distribution(distribution)
    if rate <= 0:
        return 0

    ordered = time_range.ordered()
    span = to_epoch_millis(ordered.end) - to_epoch_millis(ordered.start)
    steps = span // granularity.step_millis + 1
    if distribution == Distribution.POISSON:
        return steps * rate
    return steps * math.ceil(rate)


def sample_timestamps(
    rng: RandomSource,
    time_range: TimeRange,
    granularity: Granularity | str,
    rate: float,
    distribution: Distribution | str = Distribution.UNIFORM,
    limit: int | None = None,
) -> list[datetime]:
    """
    Sample event timestamps across a range.

    Args:
        rng: Random source
        time_range: Window to walk (inverted bounds are swapped)
        granularity: Step size (hour, minute or second)
        rate: Events per step; the exact count for UNIFORM (fractional
            rates round up), the mean for POISSON
        distribution: Per-step count model
        limit: Stop once more than this many timestamps have been produced
            (the result then has ``limit + 1`` entries)

    Returns:
        Timestamps in chronological order, all inside the range
    """
    granularity = Granularity(granularity)
    distribution = Distribution(distribution)

    if rate <= 0:
        return []

    if time_range.is_inverted:
        logger.warning("Inverted timestamp range, swapping bounds")
        record_degraded("inverted_time_range")
        time_range = time_range.ordered()

    start = to_epoch_millis(time_range.start)
    end = to_epoch_millis(time_range.end)
    step = granularity.step_millis

    out: list[datetime] = []
    t = start
    while t <= end:
        if distribution == Distribution.POISSON:
            count = poisson_sample(rng, rate)
        else:
            count = math.ceil(rate)

        batch = sorted(min(t + rng.rand_int(0, step - 1), end) for _ in range(count))
        out.extend(from_epoch_millis(ms) for ms in batch)
        if limit is not None and len(out) > limit:
            logger.debug(f"Timestamp sampling stopped past the limit of {limit}")
            return out[: limit + 1]
        t += step

    logger.debug(
        f"Sampled {len(out)} timestamps ({distribution.value}, rate={rate}/{granularity.value})"
    )
    return out
