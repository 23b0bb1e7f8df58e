"""Finite-difference solvers for European and American options."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

SIGMA = 0.2
STRIKE = 10.0
RATE = 0.04
DT = 0.002
MATURITY = 0.5

_EFD_HALF_WIDTH = 50
_IMPLICIT_HALF_WIDTH = 80


class Scheme(Enum):
    """Time-stepping scheme of the generalised solver."""

    EFD = "EFD"
    IFD = "IFD"
    CNFD = "CNFD"

    @property
    def alpha(self) -> float:
        """Weight of the explicit part of the scheme."""
        return {Scheme.EFD: 1.0, Scheme.IFD: 0.0, Scheme.CNFD: 0.5}[self]


class OptionKind(Enum):
    """Call or put."""

    CALL = "Call"
    PUT = "Put"


def efd_probabilities(dt: float, sigma: float, dx: float, r: float) -> tuple[float, float, float]:
    """Explicit scheme weights (pu, pm, pd) in log-price space."""
    drift = r - 0.5 * sigma * sigma
    pu = dt * (sigma * sigma / (2 * dx * dx) + drift / (2 * dx))
    pm = 1 - dt * sigma * sigma / (dx * dx) - r * dt
    pd = dt * (sigma * sigma / (2 * dx * dx) - drift / (2 * dx))
    return pu, pm, pd


def ifd_probabilities(dt: float, sigma: float, dx: float, r: float) -> tuple[float, float, float]:
    """Implicit scheme coefficients (pu, pm, pd) in log-price space."""
    drift = r - 0.5 * sigma * sigma
    pu = -0.5 * dt * (sigma * sigma / (dx * dx) + drift / dx)
    pm = 1 + dt * (sigma * sigma / (dx * dx)) + r * dt
    pd = -0.5 * dt * (sigma * sigma / (dx * dx) - drift / dx)
    return pu, pm, pd


def cnfd_probabilities(dt: float, sigma: float, dx: float, r: float) -> tuple[float, float, float]:
    """Crank-Nicolson coefficients (pu, pm, pd) in log-price space."""
    drift = r - 0.5 * sigma * sigma
    pu = -0.25 * dt * (sigma * sigma / (dx * dx) + drift / dx)
    pm = 1 + dt * sigma * sigma * 0.5 / (dx * dx) + r * dt * 0.5
    pd = -0.25 * dt * (sigma * sigma / (dx * dx) - drift / dx)
    return pu, pm, pd


def _time_steps() -> int:
    return int(MATURITY / DT) + 1


def _tridiagonal(size: int, lower, diag, upper) -> np.ndarray:
    """Matrix whose interior rows i hold lower, diag, upper at columns i-1, i, i+1."""
    mat = np.zeros((size, size))
    rows = np.arange(1, size - 1)
    mat[rows, rows - 1] = lower
    mat[rows, rows] = diag
    mat[rows, rows + 1] = upper
    return mat


def _log_price_grid(price: float, delta_factor: int, half_width: int) -> tuple[float, np.ndarray]:
    if price <= 0:
        raise ValueError("price must be positive")
    if delta_factor <= 0:
        raise ValueError("delta_factor must be positive")
    dx = SIGMA * math.sqrt(delta_factor * DT)
    offsets = half_width - np.arange(2 * half_width + 1)
    prices = np.exp(offsets * dx + math.log(price))
    return dx, prices


def _neumann_boundary(prices: np.ndarray) -> float:
    return -(prices[-1] - prices[-2])


def _midpoint(values: np.ndarray) -> float:
    return float(values[(values.size - 1) // 2])


def efd_euro_put(price: float, delta_factor: int) -> float:
    """European put by the explicit scheme on a log-price grid."""
    dx, prices = _log_price_grid(price, delta_factor, _EFD_HALF_WIDTH)
    pu, pm, pd = efd_probabilities(DT, SIGMA, dx, RATE)
    size = prices.size

    mat = _tridiagonal(size, pu, pm, pd)
    mat[0, 0:3] = (pu, pm, pd)
    mat[-1, -3:] = (pu, pm, pd)

    boundary = np.zeros(size)
    boundary[-1] = _neumann_boundary(prices)

    values = np.maximum(STRIKE - prices, 0.0)
    for _ in range(_time_steps()):
        values = mat @ values + boundary
    return _midpoint(values)


def _implicit_matrix(size: int, pu: float, pm: float, pd: float) -> np.ndarray:
    mat = _tridiagonal(size, pu, pm, pd)
    mat[0, 0], mat[0, 1] = 1.0, -1.0
    mat[-1, -1], mat[-1, -2] = -1.0, 1.0
    return mat


def ifd_euro_put(price: float, delta_factor: int) -> float:
    """European put by the implicit scheme on a log-price grid."""
    dx, prices = _log_price_grid(price, delta_factor, _IMPLICIT_HALF_WIDTH)
    pu, pm, pd = ifd_probabilities(DT, SIGMA, dx, RATE)
    inverse = np.linalg.inv(_implicit_matrix(prices.size, pu, pm, pd))
    edge = _neumann_boundary(prices)

    values = np.maximum(STRIKE - prices, 0.0)
    for _ in range(_time_steps()):
        rhs = values.copy()
        rhs[0] = 0.0
        rhs[-1] = edge
        values = inverse @ rhs
    return _midpoint(values)


def cnfd_euro_put(price: float, delta_factor: int) -> float:
    """European put by the Crank-Nicolson scheme on a log-price grid."""
    dx, prices = _log_price_grid(price, delta_factor, _IMPLICIT_HALF_WIDTH)
    pu, pm, pd = cnfd_probabilities(DT, SIGMA, dx, RATE)
    size = prices.size
    inverse = np.linalg.inv(_implicit_matrix(size, pu, pm, pd))
    explicit = _tridiagonal(size, -pu, -(pm - 2), -pd)
    edge = _neumann_boundary(prices)

    values = np.maximum(STRIKE - prices, 0.0)
    rhs = explicit @ values
    rhs[-1] = edge
    for _ in range(_time_steps()):
        values = inverse @ rhs
        rhs = explicit @ values
        rhs[-1] = edge
    return _midpoint(values)


def american_option_price(
    price: float, ds: float, scheme: Scheme | str, kind: OptionKind | str
) -> float:
    """American option on a price grid of spacing ds with the chosen scheme."""
    scheme = Scheme(scheme)
    kind = OptionKind(kind)
    if ds <= 0:
        raise ValueError("ds must be positive")
    half_width = int(price / ds)
    if half_width < 1:
        raise ValueError("price must be at least ds")
    size = 2 * half_width + 1

    j = np.arange(size - 1, -1, -1, dtype=float)
    prices = j * ds
    if kind is OptionKind.CALL:
        terminal = np.maximum(prices - STRIKE, 0.0)
    else:
        terminal = np.maximum(STRIKE - prices, 0.0)

    alpha = scheme.alpha
    inner = j[1:-1]
    diffusion = SIGMA * SIGMA * inner * inner
    up = 0.5 * (diffusion + RATE * inner)
    down = 0.5 * (diffusion - RATE * inner)
    centre = diffusion + RATE

    mat_a = _tridiagonal(size, up * (1 - alpha), -(1 / DT) - centre * (1 - alpha), down * (1 - alpha))
    mat_b = _tridiagonal(size, -up * alpha, -((1 / DT) - centre * alpha), -down * alpha)
    for mat in (mat_a, mat_b):
        mat[0, 0], mat[0, 1] = 1.0, -1.0
        mat[-1, -2], mat[-1, -1] = 1.0, -1.0
    inverse = np.linalg.inv(mat_a)

    values = terminal.copy()
    rhs = mat_b @ values
    for _ in range(_time_steps()):
        if kind is OptionKind.CALL:
            rhs[0] = prices[0] - prices[1]
            rhs[-1] = 0.0
        else:
            rhs[0] = 0.0
            rhs[-1] = -(prices[-1] - prices[-2])
        values = np.maximum(inverse @ rhs, terminal)
        rhs = mat_b @ values
    return _midpoint(values)