"""
Tests for windowed statistics: RollingMean, rolling_mean, locf and
mean_carried_forward.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from numlab.errors import InvalidArgument
from numlab.stats.rolling import (
    RollingMean,
    as_vector,
    locf,
    mean_carried_forward,
    rolling_mean,
    safe_div,
)

nan = np.nan


# ============================================================================
# Helpers
# ============================================================================


class TestHelpers:
    def test_safe_div(self):
        assert safe_div(10, 4) == 2.5
        assert math.isnan(safe_div(1, 0))
        assert safe_div(1, 0, default=0.0) == 0.0

    def test_as_vector_copies(self):
        x = np.array([1.0, 2.0])
        v = as_vector(x)
        v[0] = 5.0
        assert x[0] == 1.0

    def test_as_vector_rejects_2d(self):
        with pytest.raises(InvalidArgument, match="1-D"):
            as_vector([[1.0, 2.0]])


# ============================================================================
# RollingMean
# ============================================================================


class TestRollingMean:
    def test_not_ready_until_full(self):
        w = RollingMean(3)
        w.add(1.0)
        w.add(2.0)
        assert not w.is_ready()
        assert len(w) == 2
        w.add(3.0)
        assert w.is_ready()
        assert w.mean() == pytest.approx(2.0)

    def test_eviction_updates_total(self):
        w = RollingMean(2)
        for v in (1.0, 2.0, 10.0):
            w.add(v)
        assert w.sum() == pytest.approx(12.0)
        assert w.mean() == pytest.approx(6.0)

    def test_missing_only_while_inside_window(self):
        w = RollingMean(2)
        w.add(1.0)
        w.add(nan)
        assert math.isnan(w.mean())
        w.add(3.0)
        assert math.isnan(w.mean())
        w.add(5.0)
        assert w.mean() == pytest.approx(4.0)

    def test_empty_mean_is_nan(self):
        assert math.isnan(RollingMean(4).mean())

    def test_reset(self):
        w = RollingMean(2)
        w.add(nan)
        w.add(1.0)
        w.reset()
        assert len(w) == 0
        w.add(2.0)
        w.add(4.0)
        assert w.mean() == pytest.approx(3.0)

    def test_invalid_size(self):
        with pytest.raises(InvalidArgument):
            RollingMean(0)

    def test_infinities_leave_total_intact(self):
        w = RollingMean(2)
        w.add(-np.inf)
        w.add(np.inf)
        assert math.isnan(w.sum())
        w.add(1.0)
        assert w.sum() == np.inf
        w.add(2.0)
        assert w.sum() == pytest.approx(3.0)
        w.add(-np.inf)
        assert w.mean() == -np.inf
        w.add(4.0)
        assert w.mean() == -np.inf
        w.add(6.0)
        assert w.mean() == pytest.approx(5.0)

    def test_repr(self):
        w = RollingMean(5)
        w.add(1.0)
        assert repr(w) == "RollingMean(size=5, filled=1/5)"


# ============================================================================
# rolling_mean
# ============================================================================


class TestRollingMeanFunction:
    def test_reference_example(self):
        out = rolling_mean([1, 2, 3, 4, 5], 3)
        np.testing.assert_allclose(out, [nan, nan, 2.0, 3.0, 4.0])

    def test_matches_pandas(self, rng):
        pd = pytest.importorskip("pandas")
        x = rng.normal(size=300)
        expected = pd.Series(x).rolling(17).mean().to_numpy()
        np.testing.assert_allclose(rolling_mean(x, 17), expected, rtol=1e-9, atol=1e-12)

    def test_window_one_is_identity(self):
        x = [4.0, -1.0, 2.5]
        np.testing.assert_allclose(rolling_mean(x, 1), x)

    def test_window_equal_length(self):
        out = rolling_mean([2.0, 4.0, 6.0], 3)
        np.testing.assert_allclose(out, [nan, nan, 4.0])

    def test_missing_poisons_only_its_windows(self):
        out = rolling_mean([1.0, nan, 3.0, 5.0, 7.0], 2)
        np.testing.assert_allclose(out, [nan, nan, nan, 4.0, 6.0])

    def test_infinity_only_affects_its_windows(self):
        out = rolling_mean([1.0, np.inf, 2.0, 4.0, 6.0], 2)
        np.testing.assert_allclose(out, [nan, np.inf, np.inf, 3.0, 5.0])

    def test_window_one_passes_infinity_through(self):
        out = rolling_mean([np.inf, 1.0, 2.0, 3.0], 1)
        np.testing.assert_allclose(out, [np.inf, 1.0, 2.0, 3.0])

    def test_opposite_infinities_give_nan(self):
        out = rolling_mean([np.inf, -np.inf, 1.0, 3.0], 2)
        np.testing.assert_allclose(out, [nan, nan, -np.inf, 2.0])

    @pytest.mark.parametrize("window", [0, -1, 6])
    def test_invalid_window(self, window):
        with pytest.raises(InvalidArgument, match="window"):
            rolling_mean([1.0, 2.0, 3.0, 4.0, 5.0], window)

    def test_empty_input_rejected(self):
        with pytest.raises(InvalidArgument):
            rolling_mean([], 1)


# ============================================================================
# locf
# ============================================================================


class TestLocf:
    def test_reference_examples(self):
        np.testing.assert_array_equal(
            locf([1.0, nan, nan, 2.0, nan]), [1.0, 1.0, 1.0, 2.0, 2.0]
        )
        np.testing.assert_array_equal(locf([nan, 1.0]), [nan, 1.0])

    def test_leading_gap_stays_missing(self, gappy_series):
        out = locf(gappy_series)
        np.testing.assert_array_equal(out, [nan, 1.0, 1.0, 1.0, 4.0, 2.0, 2.0])

    def test_does_not_mutate_input(self, gappy_series):
        before = gappy_series.copy()
        locf(gappy_series)
        np.testing.assert_array_equal(gappy_series, before)

    def test_no_missing_is_copy(self):
        x = np.array([1.0, 2.0])
        out = locf(x)
        assert out is not x
        np.testing.assert_array_equal(out, x)

    def test_empty(self):
        assert locf([]).shape == (0,)

    def test_all_missing(self):
        assert np.isnan(locf([nan, nan])).all()


# ============================================================================
# mean_carried_forward
# ============================================================================


class TestMeanCarriedForward:
    def test_running_mean_of_observations(self):
        out = mean_carried_forward([1.0, nan, 3.0, nan])
        np.testing.assert_allclose(out, [1.0, 1.0, 3.0, 2.0])

    def test_imputed_values_do_not_feed_mean(self):
        out = mean_carried_forward([2.0, nan, nan, 4.0, nan])
        np.testing.assert_allclose(out, [2.0, 2.0, 2.0, 4.0, 3.0])

    def test_no_prior_observation_gives_nan(self, gappy_series):
        out = mean_carried_forward(gappy_series)
        assert math.isnan(out[0])
        np.testing.assert_allclose(out[1:], [1.0, 1.0, 1.0, 4.0, 2.0, 7.0 / 3.0])

    def test_does_not_mutate_input(self, gappy_series):
        before = gappy_series.copy()
        mean_carried_forward(gappy_series)
        np.testing.assert_array_equal(gappy_series, before)
