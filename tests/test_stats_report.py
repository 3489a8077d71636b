from __future__ import annotations

import json

import pytest

from strata.report import Report
from strata.stats import kurtosis, mean_var, quantiles, skewness


def test_mean_var_population():
    mean, var = mean_var([2, 4, 4, 4, 5, 5, 7, 9])
    assert mean == pytest.approx(5.0)
    assert var == pytest.approx(4.0)


def test_quantiles_linear():
    assert quantiles([1, 2, 3, 4, 5], [0.0, 0.25, 0.5, 0.75, 1.0]) == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert quantiles([1, 2, 3, 4], [0.5]) == [2.5]


def test_skewness_and_kurtosis():
    assert skewness([1, 2, 3]) == pytest.approx(0.0)
    assert skewness([1, 1, 1, 10]) > 0.0
    # 두 점 대칭 분포: m4 / m2^2 = 1
    assert kurtosis([-1, 1]) == pytest.approx(-2.0)


def test_constant_values_have_zero_shape():
    assert skewness([3, 3, 3]) == 0.0
    assert kurtosis([3, 3, 3]) == 0.0


def test_report_access_and_json():
    r = Report([{"offset": 0, "type": "categorical", "probabilities": {"하나": 1.0}}])

    assert len(r) == 1
    assert r[0]["offset"] == 0
    assert list(r)[0]["type"] == "categorical"

    text = r.to_json()
    assert "하나" in text
    assert json.loads(text) == r.attributes
    assert str(r) == text
