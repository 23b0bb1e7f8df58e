"""Amortising loan quantities used by the default option model."""

from __future__ import annotations


def _months(t: float) -> int:
    return int(t * 12)


def apr(r0: float, delta: float, lambda2: float) -> float:
    """Annual rate: base rate plus delta times the default intensity."""
    return r0 + delta * lambda2


def monthly_payment(l0: float, r: float, t: float) -> float:
    """Level monthly payment for a loan of l0 at monthly rate r over t years."""
    return l0 * r / (1 - 1 / (1 + r) ** _months(t))


def loan_a(pmt: float, r: float) -> float:
    """Constant term of the outstanding balance function."""
    return pmt / r


def loan_b(pmt: float, r: float, t: float) -> float:
    """Coefficient of the growth term in the outstanding balance function."""
    return pmt / (r * (1 + r) ** _months(t))