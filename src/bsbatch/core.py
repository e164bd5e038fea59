from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np


# ---------------------------------------------------------------------------
# Single option: one row of the dataset
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionParams:
    """Parameters of one European vanilla option.

    No domain checks are made: ``K <= 0``, ``T <= 0`` or ``sigma <= 0``
    may yield non-finite prices downstream.
    """
    S: float
    K: float
    T: float          # years
    r: float          # continuous risk-free
    sigma: float


# ---------------------------------------------------------------------------
# Batch: column-wise storage in input order
# ---------------------------------------------------------------------------
class OptionBatch:
    """Ordered, read-only batch of option parameters held as five columns.

    Parameters
    ----------
    S, K, T, r, sigma : array-like
        1-D columns of equal length.  Copied to ``float64`` and frozen.
    """

    __slots__ = ("S", "K", "T", "r", "sigma")

    def __init__(self, S, K, T, r, sigma):
        cols = [np.array(c, dtype=float).reshape(-1) for c in (S, K, T, r, sigma)]
        n = len(cols[0])
        for c in cols[1:]:
            if len(c) != n:
                raise ValueError("all columns must have the same length")
        for c in cols:
            c.flags.writeable = False
        self.S, self.K, self.T, self.r, self.sigma = cols

    @classmethod
    def from_rows(cls, rows: Sequence[OptionParams]) -> OptionBatch:
        if not rows:
            return cls([], [], [], [], [])
        S, K, T, r, sigma = zip(*((o.S, o.K, o.T, o.r, o.sigma) for o in rows))
        return cls(S, K, T, r, sigma)

    def __len__(self) -> int:
        return len(self.S)

    def __getitem__(self, i: int) -> OptionParams:
        return OptionParams(
            float(self.S[i]), float(self.K[i]), float(self.T[i]),
            float(self.r[i]), float(self.sigma[i]),
        )

    def __iter__(self) -> Iterator[OptionParams]:
        for i in range(len(self)):
            yield self[i]

    def columns(self) -> tuple[np.ndarray, ...]:
        """Return ``(S, K, T, r, sigma)``."""
        return self.S, self.K, self.T, self.r, self.sigma

    def __repr__(self) -> str:
        return f"OptionBatch(n={len(self)})"


CALL = "call"
PUT  = "put"
