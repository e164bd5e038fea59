# black_scholes.py
# Closed-form Black-Scholes prices for European vanilla calls and puts.
# Every function accepts scalars *or* NumPy arrays and broadcasts; scalar
# inputs return a plain float.
#
# Inputs are not range-checked.  K <= 0, T <= 0 or sigma <= 0 may produce
# NaN / inf prices instead of raising.

from __future__ import annotations
from typing import Literal

import numpy as np

from .core import OptionParams, CALL, PUT
from .normal import norm_cdf as _N


def _unwrap(x):
    return float(x) if np.ndim(x) == 0 else x


def d1_d2(S, K, T, r, sigma):
    """Return the ``(d1, d2)`` terms of the Black-Scholes formula."""
    S, K, T, r, sigma = (np.asarray(x, dtype=float) for x in (S, K, T, r, sigma))
    with np.errstate(all="ignore"):
        sig_sqrt_T = sigma * np.sqrt(T)
        log_SK = np.log(S / K)
        half_var = 0.5 * sigma * sigma
        d1 = (log_SK + (r + half_var) * T) / sig_sqrt_T
        d2 = (log_SK + (r - half_var) * T) / sig_sqrt_T
    return _unwrap(d1), _unwrap(d2)


def euro_vanilla_call(S, K, T, r, sigma):
    """Black-Scholes price of a European call: ``S N(d1) - K e^{-rT} N(d2)``."""
    d1, d2 = d1_d2(S, K, T, r, sigma)
    S, K, T, r = (np.asarray(x, dtype=float) for x in (S, K, T, r))
    with np.errstate(all="ignore"):
        px = S * _N(d1) - K * np.exp(-r * T) * _N(d2)
    return _unwrap(px)


def euro_vanilla_put(S, K, T, r, sigma):
    """Black-Scholes price of a European put: ``K e^{-rT} N(-d2) - S N(-d1)``."""
    d1, d2 = d1_d2(S, K, T, r, sigma)
    S, K, T, r = (np.asarray(x, dtype=float) for x in (S, K, T, r))
    with np.errstate(all="ignore"):
        px = K * np.exp(-r * T) * _N(-d2) - S * _N(-d1)
    return _unwrap(px)


def price(opt: OptionParams, kind: Literal["call", "put"] = CALL) -> float:
    """Price a single ``OptionParams`` as a call or a put."""
    if kind == CALL:
        return euro_vanilla_call(opt.S, opt.K, opt.T, opt.r, opt.sigma)
    elif kind == PUT:
        return euro_vanilla_put(opt.S, opt.K, opt.T, opt.r, opt.sigma)
    else:
        raise ValueError("kind must be 'call' or 'put'")
