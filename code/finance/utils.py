import math
from typing import Optional


def finite_or_none(v: Optional[float]) -> Optional[float]:
    # JSON has no infinity; unreachable horizons travel as None
    if v is None or math.isinf(v):
        return None
    return v


def round_or_none(v: Optional[float], ndigits=2) -> Optional[float]:
    v = finite_or_none(v)
    if v is None:
        return None
    return round(v, ndigits)
