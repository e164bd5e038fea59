# normal.py
# Standard-normal cumulative distribution function.

from __future__ import annotations
import numpy as np
from scipy.special import ndtr


def norm_cdf(x):
    """P(Z <= x) for a standard normal Z.

    Scalars give a ``float``, array-likes give an ``ndarray`` of the same
    shape.  NaN propagates; ``-inf`` maps to 0.0 and ``+inf`` to 1.0.
    """
    out = ndtr(np.asarray(x, dtype=float))
    if np.ndim(out) == 0:
        return float(out)
    return out
