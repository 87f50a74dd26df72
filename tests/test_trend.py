import pytest

from ohc_impact.data_models.ohc_series import RegressionPoint
from ohc_impact.services.trend_service import compute_ols_slope, points_from_series


def _pts(*pairs) -> list:
    return [RegressionPoint(x=x, y=y) for x, y in pairs]


def test_slope_is_zero_below_three_points():
    assert compute_ols_slope([]) == 0.0
    assert compute_ols_slope(_pts((0, 0))) == 0.0
    assert compute_ols_slope(_pts((0, 0), (1, 5))) == 0.0


def test_slope_of_colinear_points_is_exact():
    assert compute_ols_slope(_pts((0, 0), (1, 2), (2, 4))) == 2.0


def test_slope_on_year_scale_x_values():
    years = list(range(1990, 2005))
    values = [3.0 * (y - 1990) + 10.0 for y in years]

    assert compute_ols_slope(points_from_series(years, values)) == pytest.approx(3.0)


def test_slope_of_noisy_points_matches_least_squares():
    # y = 1 + 0.5x with symmetric noise
    pts = _pts((0, 1.0), (1, 1.7), (2, 1.8), (3, 2.5))
    # Sx=6, Sy=7, Sxy=12.8... computed by hand: (4*12.8 - 6*7) / (4*14 - 36)
    assert compute_ols_slope(pts) == pytest.approx((4 * 12.8 - 42) / 20)


def test_vertical_line_reports_zero(caplog):
    assert compute_ols_slope(_pts((2000, 1.0), (2000, 2.0), (2000, 3.0))) == 0.0
    assert any("Degenerate" in rec.message for rec in caplog.records)


def test_points_from_series_requires_equal_lengths():
    with pytest.raises(ValueError):
        points_from_series([1, 2, 3], [1.0, 2.0])
