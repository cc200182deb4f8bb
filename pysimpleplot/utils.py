from __future__ import annotations

from typing import Any, List, Optional, Sequence

import numpy as np

from .exceptions import InvalidAxisOptionError


def format_number(value: Any) -> str:
    """Render one coordinate the way the host numeric type prints itself."""
    return str(value)


def sample_axis(
    start: float,
    stop: float,
    step: float,
    points: Optional[Sequence[float]] = None,
) -> List[float]:
    """Return the sample positions for one axis.

    Explicit ``points`` win over the interval. Otherwise the closed interval
    [start, stop] is walked in ``step`` increments; the point count is derived
    from the step so the end point is hit exactly instead of drifting through
    accumulated float error.
    """
    if points is not None:
        values = [float(p) for p in points]
        if not values:
            raise InvalidAxisOptionError("explicit sample point list is empty")
        return values

    lo = float(start)
    hi = float(stop)
    st = float(step)
    if not (np.isfinite(lo) and np.isfinite(hi) and np.isfinite(st)):
        raise InvalidAxisOptionError(
            f"sample domain must be finite, got [{start}, {stop}] step {step}"
        )
    if st <= 0.0:
        raise InvalidAxisOptionError(f"sample step must be positive, got {step}")
    if hi < lo:
        raise InvalidAxisOptionError(f"empty sample range [{start}, {stop}]")

    count = int(np.floor((hi - lo) / st + 1e-9)) + 1
    last = lo + (count - 1) * st
    # +0.0 folds negative zero into zero
    return (np.round(np.linspace(lo, last, count), 12) + 0.0).tolist()
