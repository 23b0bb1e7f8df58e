"""Option prices by closed form, lattices and simulation."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from compfin.mathutils import mean, pnorm, scale
from compfin.randoms import MODULUS, box_muller_halton, halton_sequence, wiener_process

_BINOMIAL_METHODS = ("a", "b", "c", "d")
_TRINOMIAL_METHODS = ("a", "b")


def call_payoffs_simulated(
    w_t: Sequence[float], r: float, sigma: float, t: float, s0: float, strike: float
) -> list[float]:
    """Discounted call payoffs for terminal Wiener values w_t under GBM."""
    drift = (r - sigma * sigma / 2) * t
    discount = math.exp(r * t)
    return [max(s0 * math.exp(drift + sigma * w) - strike, 0.0) / discount for w in w_t]


def call_antithetic(
    seed: int, size: int, r: float, sigma: float, t: float, s0: float, strike: float
) -> float:
    """Monte Carlo call price with antithetic variates."""
    w_t = wiener_process(t, size, seed)
    plus = call_payoffs_simulated(w_t, r, sigma, t, s0, strike)
    minus = call_payoffs_simulated(scale(w_t, -1), r, sigma, t, s0, strike)
    return mean(0.5 * (a + b) for a, b in zip(plus, minus))


def _d1_d2(r: float, sigma: float, t: float, s0: float, strike: float) -> tuple[float, float]:
    d1 = (math.log(s0 / strike) + (r + 0.5 * sigma * sigma) * t) / (sigma * math.sqrt(t))
    return d1, d1 - sigma * math.sqrt(t)


def call_black_scholes(r: float, sigma: float, t: float, s0: float, strike: float) -> float:
    """Black-Scholes price of a European call."""
    d1, d2 = _d1_d2(r, sigma, t, s0, strike)
    return s0 * pnorm(d1) - strike * pnorm(d2) / math.exp(r * t)


def put_black_scholes(r: float, sigma: float, t: float, s0: float, strike: float) -> float:
    """Black-Scholes price of a European put."""
    d1, d2 = _d1_d2(r, sigma, t, s0, strike)
    return strike * pnorm(-d2) / math.exp(r * t) - s0 * pnorm(-d1)


def _check_steps(steps: int) -> None:
    if steps < 1:
        raise ValueError("steps must be at least 1")


def _binomial_factors(method: str, r: float, sigma: float, delta: float) -> tuple[float, float, float]:
    """Return (u, d, p_up) for the chosen parametrisation."""
    if method == "a":
        c = 0.5 * (math.exp(-r * delta) + math.exp((r + sigma * sigma) * delta))
        d = c - math.sqrt(c * c - 1)
        u = 1 / d
        return u, d, (math.exp(r * delta) - d) / (u - d)
    if method == "b":
        growth = math.exp(r * delta)
        spread = math.sqrt(math.exp(sigma * sigma * delta) - 1)
        return growth * (1 + spread), growth * (1 - spread), 0.5
    if method == "c":
        drift = (r - sigma * sigma * 0.5) * delta
        jump = sigma * math.sqrt(delta)
        return math.exp(drift + jump), math.exp(drift - jump), 0.5
    if method == "d":
        jump = sigma * math.sqrt(delta)
        p_up = 0.5 + 0.5 * ((r - 0.5 * sigma * sigma) * math.sqrt(delta) / sigma)
        return math.exp(jump), math.exp(-jump), p_up
    raise ValueError(f"unknown binomial method {method!r}; expected one of {_BINOMIAL_METHODS}")


def _binomial(
    method: str, s: float, k: float, r: float, sigma: float, t: float, steps: int,
    *, call: bool, american: bool,
) -> float:
    _check_steps(steps)
    delta = t / steps
    u, d, p_up = _binomial_factors(method, r, sigma, delta)
    p_down = 1 - p_up
    discount = math.exp(r * delta)

    def intrinsic(level: int, j: int) -> float:
        price = s * u**j * d ** (level - j)
        return max(0.0, price - k) if call else max(0.0, k - price)

    values = [intrinsic(steps, j) for j in range(steps + 1)]
    for level in range(steps - 1, -1, -1):
        continuation = [
            p_down * lo + p_up * hi for lo, hi in zip(values[:-1], values[1:])
        ]
        if american:
            values = [
                max(cont, intrinsic(level, j)) / discount
                for j, cont in enumerate(continuation)
            ]
        else:
            values = [cont / discount for cont in continuation]
    return values[0]


def call_european_binomial(
    method: str, s: float, k: float, r: float, sigma: float, t: float, steps: int
) -> float:
    """European call on a binomial tree; method is one of 'a', 'b', 'c', 'd'."""
    return _binomial(method, s, k, r, sigma, t, steps, call=True, american=False)


def put_european_binomial(
    method: str, s: float, k: float, r: float, sigma: float, t: float, steps: int
) -> float:
    """European put on a binomial tree; method is one of 'a', 'b', 'c', 'd'."""
    return _binomial(method, s, k, r, sigma, t, steps, call=False, american=False)


def put_american_binomial(
    method: str, s: float, k: float, r: float, sigma: float, t: float, steps: int
) -> float:
    """American put on a binomial tree; the larger of continuation and exercise is discounted."""
    return _binomial(method, s, k, r, sigma, t, steps, call=False, american=True)


def call_european_trinomial(
    method: str, s: float, k: float, r: float, sigma: float, t: float, steps: int
) -> float:
    """European call on a trinomial tree; method 'a' works in prices, 'b' in log prices."""
    _check_steps(steps)
    delta = t / steps
    discount = math.exp(r * delta)
    rd = r * delta

    if method == "a":
        d = math.exp(-sigma * math.sqrt(3 * delta))
        u = 1 / d
        p_down = (rd * (1 - u) + rd * rd + sigma * sigma * delta) / ((u - d) * (1 - d))
        p_up = (rd * (1 - d) + rd * rd + sigma * sigma * delta) / ((u - d) * (u - 1))

        def terminal(j: int) -> float:
            return s * u ** max(steps - j, 0) * d ** max(j - steps, 0)
    elif method == "b":
        dx_up = sigma * math.sqrt(3 * delta)
        dx_down = -dx_up
        nu = r - 0.5 * sigma * sigma
        second = sigma * sigma * delta + nu * nu * delta * delta
        first = nu * delta
        p_down = 0.5 * (second / (dx_up * dx_up) - first / dx_up)
        p_up = 0.5 * (second / (dx_up * dx_up) + first / dx_up)
        x0 = math.log(s)

        def terminal(j: int) -> float:
            return math.exp(x0 + dx_up * max(steps - j, 0) + dx_down * max(j - steps, 0))
    else:
        raise ValueError(
            f"unknown trinomial method {method!r}; expected one of {_TRINOMIAL_METHODS}"
        )

    p_mid = 1 - p_down - p_up
    values = [max(0.0, terminal(j) - k) for j in range(2 * steps + 1)]
    for _ in range(steps):
        values = [
            (p_up * hi + p_mid * mid + p_down * lo) / discount
            for hi, mid, lo in zip(values, values[1:], values[2:])
        ]
    return values[0]


def call_european_lds(
    s: float, k: float, r: float, sigma: float, t: float, n: int, base1: int, base2: int
) -> float:
    """European call by quasi-Monte Carlo with two Halton sequences."""
    if n < 1:
        raise ValueError("n must be at least 1")
    normals = box_muller_halton(halton_sequence(base1, n), halton_sequence(base2, n))
    w_t = scale(normals, math.sqrt(t))
    return mean(call_payoffs_simulated(w_t, r, sigma, t, s, k))


def _extreme_paths(
    r: float, s0: float, sigma: float, num: int, steps: int, delta: float,
    rng: random.Random | None,
):
    if num < 1:
        raise ValueError("num must be at least 1")
    _check_steps(steps)
    rng = rng if rng is not None else random.Random()
    drift = (r - 0.5 * sigma * sigma) * delta
    for _ in range(num):
        dwt = wiener_process(delta, steps, rng.randrange(1, MODULUS))
        price = s0
        path = []
        for dw in dwt:
            price *= math.exp(drift + sigma * dw)
            path.append(price)
        yield path


def lookback_call(
    r: float, t: float, s0: float, strike: float, sigma: float,
    num: int, steps: int, delta: float, rng: random.Random | None = None,
) -> float:
    """Average payoff of a fixed-strike lookback call over simulated paths."""
    total = 0.0
    for path in _extreme_paths(r, s0, sigma, num, steps, delta, rng):
        total += max(max(path) - strike, 0.0)
    return total / num


def lookback_put(
    r: float, t: float, s0: float, strike: float, sigma: float,
    num: int, steps: int, delta: float, rng: random.Random | None = None,
) -> float:
    """Average payoff of a fixed-strike lookback put over simulated paths."""
    cap = float(2**31 - 1)
    total = 0.0
    for path in _extreme_paths(r, s0, sigma, num, steps, delta, rng):
        total += max(strike - min(min(path), cap), 0.0)
    return total / num