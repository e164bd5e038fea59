"""Tests for the closed-form Black-Scholes pricers."""

import math

import numpy as np
import pytest
from bsbatch.core import OptionParams, CALL, PUT
from bsbatch.black_scholes import d1_d2, euro_vanilla_call, euro_vanilla_put, price


def test_bs_known_values():
    opt = OptionParams(S=100, K=100, T=1.0, r=0.05, sigma=0.2)
    assert abs(price(opt, CALL) - 10.4506) < 1e-3
    assert abs(price(opt, PUT)  - 5.5735)  < 1e-3


def test_scalar_inputs_return_float():
    assert isinstance(euro_vanilla_call(100, 100, 1.0, 0.05, 0.2), float)
    assert isinstance(euro_vanilla_put(100, 100, 1.0, 0.05, 0.2), float)


def test_d1_d2_differ_by_sigma_sqrt_t():
    d1, d2 = d1_d2(100, 110, 0.5, 0.03, 0.25)
    assert d1 - d2 == pytest.approx(0.25 * math.sqrt(0.5), abs=1e-12)


def test_unknown_kind_rejected():
    opt = OptionParams(S=100, K=100, T=1.0, r=0.05, sigma=0.2)
    with pytest.raises(ValueError):
        price(opt, "straddle")


# ---------------------------------------------------------------------------
# No-arbitrage properties over a grid of in-domain inputs
# ---------------------------------------------------------------------------
SPOTS = [80.0, 95.0, 100.0, 105.0, 120.0]
STRIKES = [90.0, 100.0, 110.0]
MATURITIES = [0.25, 1.0, 2.0]
RATES = [0.0, 0.03, 0.07]
VOLS = [0.1, 0.25, 0.5]


class TestNoArbitrage:
    @pytest.mark.parametrize("S", SPOTS)
    @pytest.mark.parametrize("K", STRIKES)
    def test_put_call_parity(self, S, K):
        for T in MATURITIES:
            for r in RATES:
                for sigma in VOLS:
                    call = euro_vanilla_call(S, K, T, r, sigma)
                    put = euro_vanilla_put(S, K, T, r, sigma)
                    forward = S - K * math.exp(-r * T)
                    assert call - put == pytest.approx(forward, rel=1e-6, abs=1e-9)

    @pytest.mark.parametrize("S", SPOTS)
    def test_prices_non_negative(self, S):
        for K in STRIKES:
            for T in MATURITIES:
                for r in RATES:
                    for sigma in VOLS:
                        assert euro_vanilla_call(S, K, T, r, sigma) >= 0.0
                        assert euro_vanilla_put(S, K, T, r, sigma) >= 0.0

    def test_call_bounds(self):
        call = euro_vanilla_call(100, 90, 1.0, 0.05, 0.2)
        assert 100 - 90 * math.exp(-0.05) < call < 100


# ---------------------------------------------------------------------------
# Array inputs broadcast and agree with scalar calls
# ---------------------------------------------------------------------------
class TestArrayInputs:
    def test_array_matches_scalar(self):
        strikes = np.array([90.0, 100.0, 110.0])
        calls = euro_vanilla_call(100, strikes, 1.0, 0.05, 0.2)
        puts = euro_vanilla_put(100, strikes, 1.0, 0.05, 0.2)
        assert calls.shape == (3,)
        for i, K in enumerate(strikes):
            assert abs(calls[i] - euro_vanilla_call(100, K, 1.0, 0.05, 0.2)) < 1e-12
            assert abs(puts[i] - euro_vanilla_put(100, K, 1.0, 0.05, 0.2)) < 1e-12

    def test_call_decreasing_in_strike(self):
        strikes = np.linspace(80, 120, 50)
        prices = euro_vanilla_call(100, strikes, 1.0, 0.05, 0.2)
        assert np.all(np.diff(prices) < 0)


# ---------------------------------------------------------------------------
# Out-of-domain inputs propagate as non-finite values without raising
# ---------------------------------------------------------------------------
class TestOutOfDomain:
    @pytest.mark.parametrize("args", [
        (100, 100, 0.0, 0.05, 0.2),    # T = 0, S = K: 0 / 0
        (100, -5.0, 1.0, 0.05, 0.2),   # log of a negative ratio
        (0.0, 0.0, 1.0, 0.05, 0.2),    # 0 / 0
    ])
    def test_nan_prices(self, args):
        assert math.isnan(euro_vanilla_call(*args))
        assert math.isnan(euro_vanilla_put(*args))

    def test_zero_strike_does_not_raise(self):
        assert euro_vanilla_call(100, 0.0, 1.0, 0.05, 0.2) == pytest.approx(100.0)
        assert euro_vanilla_put(100, 0.0, 1.0, 0.05, 0.2) == pytest.approx(0.0)

    def test_zero_vol_collapses_to_discounted_intrinsic(self):
        call = euro_vanilla_call(100, 100, 1.0, 0.05, 0.0)
        assert call == pytest.approx(100 - 100 * math.exp(-0.05))
        assert euro_vanilla_put(100, 100, 1.0, 0.05, 0.0) == pytest.approx(0.0)

    def test_nan_input_gives_nan(self):
        assert math.isnan(euro_vanilla_call(float("nan"), 100, 1.0, 0.05, 0.2))
        assert math.isnan(euro_vanilla_put(100, 100, 1.0, 0.05, float("nan")))

    def test_no_warnings_raised(self, recwarn):
        euro_vanilla_call(100, 0.0, 0.0, 0.05, 0.0)
        euro_vanilla_put(np.array([100.0, 100.0]), np.array([0.0, 100.0]), 1.0, 0.05, 0.2)
        assert len(recwarn) == 0
