import pytest

from compfin.loan import apr, loan_a, loan_b, monthly_payment

L0 = 22000.0
R = 0.01
T = 5.0


def test_apr_without_intensity_is_base_rate():
    assert apr(0.02, 0.25, 0.0) == 0.02


def test_apr_example():
    assert apr(0.02, 0.25, 0.4) == pytest.approx(0.12)


def test_payment_present_value_equals_principal():
    pmt = monthly_payment(L0, R, T)
    months = int(T * 12)
    present_value = sum(pmt / (1 + R) ** k for k in range(1, months + 1))
    assert present_value == pytest.approx(L0)


def test_payment_truncates_months():
    assert monthly_payment(L0, R, 1.09) == monthly_payment(L0, R, 1.0)


def test_payment_decreases_with_term():
    assert monthly_payment(L0, R, 3.0) > monthly_payment(L0, R, 8.0)


def test_balance_starts_at_principal():
    pmt = monthly_payment(L0, R, T)
    assert loan_a(pmt, R) - loan_b(pmt, R, T) == pytest.approx(L0)


def test_balance_ends_at_zero():
    pmt = monthly_payment(L0, R, T)
    months = int(T * 12)
    final = loan_a(pmt, R) - loan_b(pmt, R, T) * (1 + R) ** months
    assert final == pytest.approx(0.0, abs=1e-8)


def test_zero_rate_raises():
    with pytest.raises(ZeroDivisionError):
        loan_a(100.0, 0.0)