"""
Volume calculator — a scalar "load" for one set or one cardio session.

Logged sets come in three shapes and each has its own volume proxy:

=====================  =======================  ======================
Recorded fields        Example                  Load
=====================  =======================  ======================
weight + reps          bench press 60 × 8       ``weight × reps``
duration               plank 45 s, run 30 min   ``duration_seconds``
reps only              push-ups × 12            ``reps``
=====================  =======================  ======================

A recorded weight of ``0`` is taken at face value and yields ``0``; the
calculator never guesses body mass.  Only a set with *no* weight field
falls back to its rep count, so bodyweight rep work does not vanish from
the heatmap.

The result is always a finite, non-negative float.  A set with no usable
field yields ``0.0`` and is logged; malformed data never raises.
Metric sanitising itself happens when the set is parsed (see
:mod:`app.schemas.workout`).
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Iterable, Optional

from app.schemas.workout import LoggedSet, WorkoutLogEntry

logger = logging.getLogger(__name__)

# Loads saturate here so sums over huge logs stay finite
MAX_LOAD = sys.float_info.max


def _usable(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value >= 0.0


def _bounded(value: float) -> float:
    return min(value, MAX_LOAD)


def bounded_sum(values: Iterable[float]) -> float:
    """``math.fsum`` that saturates at :data:`MAX_LOAD` instead of overflowing."""
    try:
        return _bounded(math.fsum(values))
    except OverflowError:
        return MAX_LOAD


def set_load(logged_set: LoggedSet) -> float:
    """Compute the load of a single set.

    Rules, first match wins:

    1. ``weight`` and ``reps`` recorded → ``weight × reps``
    2. ``duration_seconds`` recorded → ``duration_seconds``
    3. ``reps`` recorded → ``reps``
    4. otherwise → ``0.0``

    A ``weight × reps`` product too large for a float counts as no
    usable metric.
    """
    weight = logged_set.weight
    reps = logged_set.reps
    duration = logged_set.duration_seconds

    if _usable(weight) and _usable(reps):
        load = weight * reps
        if math.isfinite(load):
            return load
    elif _usable(duration):
        return float(duration)
    elif _usable(reps) and weight is None:
        return float(reps)

    logger.debug("Set has no usable volume metric, counting as 0: %r", logged_set)
    return 0.0


def entry_load(entry: WorkoutLogEntry) -> float:
    """Sum of :func:`set_load` over every set of *entry*, at most :data:`MAX_LOAD`."""
    return bounded_sum(set_load(s) for s in entry.sets)


def session_load(duration_seconds: Optional[float]) -> float:
    """Load of a cardio session logged without sets (its duration)."""
    if _usable(duration_seconds):
        return float(duration_seconds)
    return 0.0
