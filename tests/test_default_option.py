import math

import pytest

from compfin.default_option import (
    DefaultResult,
    collateral_path,
    loan_balance,
    price_default_option,
    q_function,
)


@pytest.fixture(scope="module")
def result():
    return price_default_option(0.2, 0.4, 5)


def test_q_function_endpoints():
    q = q_function(5, 0.005, 1000)
    assert len(q) == 1001
    assert q[0] == 0.7
    assert q[-1] == pytest.approx(0.95)


def test_q_function_increasing():
    q = q_function(5, 0.005, 1000)
    assert all(a < b for a, b in zip(q, q[1:]))


def test_q_function_uses_whole_years():
    assert q_function(5.9, 0.005, 10) == q_function(5, 0.005, 10)


def test_q_function_rejects_short_horizon():
    with pytest.raises(ValueError):
        q_function(0.5, 0.0005, 1000)


def test_loan_balance_endpoints():
    balance = loan_balance(5, 0.005, 1000, 0.4)
    assert len(balance) == 1001
    assert balance[0] == 22000
    assert balance[-1] == 0.0


def test_loan_balance_decreasing():
    balance = loan_balance(5, 0.005, 1000, 0.4)
    assert all(a > b for a, b in zip(balance, balance[1:]))
    assert balance[1] == pytest.approx(22000, rel=1e-3)


def test_loan_balance_without_intensity():
    balance = loan_balance(3, 0.003, 1000, 0.0)
    assert balance[-1] == 0.0
    assert all(a > b for a, b in zip(balance, balance[1:]))


def test_collateral_path_shape():
    path = collateral_path(0.005, 1000, 1234, 0.2)
    assert len(path) == 1001
    assert path[0] == 20000
    assert all(v >= 0 for v in path)


def test_collateral_path_is_deterministic():
    assert collateral_path(0.005, 200, 99, 0.3) == collateral_path(0.005, 200, 99, 0.3)
    assert collateral_path(0.005, 200, 99, 0.3) != collateral_path(0.005, 200, 100, 0.3)


def test_jumps_only_lower_the_path():
    plain = collateral_path(0.005, 200, 77, 0.0)
    jumped = collateral_path(0.005, 200, 77, 1e6)
    assert all(j <= p + 1e-9 for j, p in zip(jumped, plain))
    assert jumped[-1] < plain[-1]


def test_collateral_path_rejects_negative_intensity():
    with pytest.raises(ValueError):
        collateral_path(0.005, 10, 1, -0.1)


def test_price_default_option_ranges(result):
    assert isinstance(result, DefaultResult)
    assert 0.0 <= result.default_probability <= 1.0
    assert result.price >= 0.0


def test_expected_tau_within_horizon(result):
    if result.default_probability > 0:
        assert 0.0 <= result.expected_tau <= 5
    else:
        assert math.isnan(result.expected_tau)


def test_price_default_option_rejects_short_horizon():
    with pytest.raises(ValueError):
        price_default_option(0.2, 0.4, 0.5)