"""Jump-diffusion collateral model and the default option on an amortising loan."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass

from compfin.loan import apr, loan_a, loan_b, monthly_payment
from compfin.pricing import lookback_call, lookback_put
from compfin.randoms import wiener_process

ALPHA = 0.7
EPSILON = 0.95
LOAN_0 = 22000.0
R0 = 0.02
DELTA = 0.25

V0 = 20000.0
GAMMA = -0.4
MU = -0.1
SIGMA_V = 0.2

STEPS = 1000
N_SIMS = 1000
BASE_SEED = 1234
SEED_STRIDE = 500
_ABSORB_BELOW = 0.01

_BANNER = "#" * 95


@dataclass(frozen=True)
class DefaultResult:
    """Outcome of the default option simulation."""

    price: float
    default_probability: float
    expected_tau: float


def _exponential(rng: random.Random, lam: float) -> float:
    """Exponential draw with rate lam; a zero rate never fires."""
    if lam < 0:
        raise ValueError("intensity must be non-negative")
    if lam == 0:
        return math.inf
    return rng.expovariate(lam)


def q_function(t_total: float, dt: float, steps: int) -> list[float]:
    """Recovery threshold q(t) on the time grid; t_total is taken in whole years."""
    years = int(t_total)
    if years < 1:
        raise ValueError("t_total must be at least one year")
    beta = (EPSILON - ALPHA) / years
    return [ALPHA + beta * dt * i for i in range(steps + 1)]


def loan_balance(t_total: float, dt: float, steps: int, lambda2: float) -> list[float]:
    """Outstanding loan balance on the time grid, ending at zero."""
    r = apr(R0, DELTA, lambda2) / 12
    pmt = monthly_payment(LOAN_0, r, t_total)
    a = loan_a(pmt, r)
    b = loan_b(pmt, r, t_total)
    c = 1 + r
    balance = [LOAN_0] + [a - b * c ** (12 * dt * i) for i in range(1, steps + 1)]
    balance[steps] = 0.0
    return balance


def collateral_path(dt: float, steps: int, seed: int, lambda1: float) -> list[float]:
    """One path of the collateral value with downward jumps at rate lambda1."""
    rng = random.Random(seed)
    next_jump = _exponential(rng, lambda1)
    dwt = wiener_process(dt, steps, seed)
    values = [V0]
    for i, dw in enumerate(dwt):
        current = values[i]
        if dt * i > next_jump:
            next_jump += _exponential(rng, lambda1)
            current *= 1 + GAMMA
            values[i] = current
        following = current + current * MU * dt + SIGMA_V * current * dw
        values.append(0.0 if following < _ABSORB_BELOW else following)
    return values


def price_default_option(lambda1: float, lambda2: float, t_total: float) -> DefaultResult:
    """Simulate the default option price, default probability and expected default time."""
    steps = STEPS
    dt = t_total / steps
    loan = loan_balance(t_total, dt, steps, lambda2)
    thresholds = [q * bal for q, bal in zip(q_function(t_total, dt, steps), loan)]

    seed = BASE_SEED
    total_payoff = 0.0
    defaults = 0
    tau_sum = 0.0

    for k in range(N_SIMS):
        seed += SEED_STRIDE * k
        rng = random.Random(seed)
        extreme = _exponential(rng, lambda2)
        values = collateral_path(dt, steps, seed, lambda1)

        tau = t_total
        q_time = t_total
        q_value = q_loan = 0.0
        s_value = s_loan = 0.0
        for i, (value, balance, threshold) in enumerate(zip(values, loan, thresholds)):
            now = dt * i
            if now > extreme:
                s_value, s_loan = value, balance
                tau = extreme
                break
            if value <= threshold:
                q_time, q_value, q_loan = now, value, balance
                tau = now

        if tau < t_total:
            defaults += 1
            tau_sum += tau
            if q_time <= extreme:
                total_payoff += max(q_loan - EPSILON * q_value, 0.0) * math.exp(-R0 * q_time)
            else:
                total_payoff += abs(s_loan - EPSILON * s_value) * math.exp(-R0 * extreme)

    expected_tau = tau_sum / defaults if defaults else math.nan
    return DefaultResult(total_payoff / N_SIMS, defaults / N_SIMS, expected_tau)


def _g(value: float) -> str:
    return format(value, "g")


def _print_lookbacks(rng: random.Random) -> None:
    r, t, s0, strike = 0.03, 1.0, 98.0, 100.0
    num, steps = 1000, 100
    delta = t / steps
    sigmas = [0.12 + 0.04 * i for i in range(10)]

    print("Call Price is: ")
    for sigma in sigmas:
        print(_g(lookback_call(r, t, s0, strike, sigma, num, steps, delta, rng)))
    print("Put Price is: ")
    for sigma in sigmas:
        print(_g(lookback_put(r, t, s0, strike, sigma, num, steps, delta, rng)))


def _print_row(year: int, lam: float, result: DefaultResult) -> None:
    print(
        f"{year} {_g(lam)} {_g(result.price)} "
        f"{_g(result.default_probability)} {_g(result.expected_tau)}"
    )


def main(argv: list[str] | None = None) -> int:
    """Print lookback prices and the default option tables."""
    parser = argparse.ArgumentParser(
        description="Lookback option prices and default option tables."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the lookback paths")
    args = parser.parse_args(argv)

    print(f"{'#' * 40} Qn1 {'#' * 50}")
    _print_lookbacks(random.Random(args.seed))
    print(_BANNER)
    print(f"{'#' * 40} Qn2 {'#' * 50}")

    lambda2 = 0.4
    print("lamda Two is 0.4")
    print("Year lamdaOne Option_Price Probability Expected_Tau")
    for year in range(3, 9):
        for i in range(9):
            lambda1 = 0.05 + i * 0.05
            _print_row(year, lambda1, price_default_option(lambda1, lambda2, year))

    lambda1 = 0.2
    print("lamda One is 0.2")
    print("Year lamdaTwo Option_Price Probability Expected_Tau")
    for year in range(3, 9):
        for i in range(9):
            lambda2 = i * 0.1
            _print_row(year, lambda2, price_default_option(lambda1, lambda2, year))

    print(_BANNER)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())