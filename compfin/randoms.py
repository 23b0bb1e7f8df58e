"""Pseudo-random and quasi-random number generation."""

from __future__ import annotations

import math
from collections.abc import Sequence

from compfin.mathutils import dot, scale

MODULUS = 2**31 - 1
MULTIPLIER = 7**5
DEFAULT_SEED = 1234567890
_UINT32 = 0xFFFFFFFF


def lgm_next(m: int, num: int) -> int:
    """Next state of the multiplicative congruential generator.

    The product is taken in 32-bit unsigned arithmetic before the modulus.
    """
    return ((MULTIPLIER * (num & _UINT32)) & _UINT32) % m


def runif(size: int, seed: int) -> list[float]:
    """Uniform variates from the congruential generator, starting with seed / m."""
    if seed < 0:
        raise ValueError("seed must be non-negative")
    values = []
    state = seed
    for _ in range(size):
        values.append(state / MODULUS)
        state = lgm_next(MODULUS, state)
    return values


def rbinom(size: int, n: int, p: float, seed: int) -> list[int]:
    """Binomial(n, p) variates, each the count of n uniforms not above p."""
    uniforms = runif(size * n, seed)
    return [
        sum(1 for u in uniforms[k * n:(k + 1) * n] if u <= p)
        for k in range(size)
    ]


def rexp(uniforms: Sequence[float], lam: float) -> list[float]:
    """Exponential variates -lam * log(u) from uniforms."""
    return [-lam * math.log(u) for u in uniforms]


def box_muller(uniforms: Sequence[float]) -> list[float]:
    """Standard normals from consecutive pairs of uniforms."""
    if len(uniforms) % 2:
        raise ValueError("an even number of uniforms is required")
    normals = []
    for u1, u2 in zip(uniforms[::2], uniforms[1::2]):
        radius = math.sqrt(-2 * math.log(u1))
        angle = 2 * math.pi * u2
        normals.extend((radius * math.cos(angle), radius * math.sin(angle)))
    return normals


def box_muller_halton(base1: Sequence[float], base2: Sequence[float]) -> list[float]:
    """Standard normals from two low-discrepancy sequences.

    Even positions use the cosine branch, odd positions the sine branch.
    """
    if len(base1) != len(base2):
        raise ValueError("both sequences must have the same length")
    return [
        math.sqrt(-2 * math.log(a)) * (math.sin if k % 2 else math.cos)(2 * math.pi * b)
        for k, (a, b) in enumerate(zip(base1, base2))
    ]


def polar_marsaglia(uniforms: Sequence[float]) -> list[float]:
    """Standard normals by the polar method over overlapping uniform pairs.

    Uses the pairs (u[i], u[i+1]) for the first half of the input and keeps
    the pairs that fall inside the unit disc.
    """
    normals = []
    half = len(uniforms) // 2
    for u1, u2 in zip(uniforms[:half], uniforms[1:half + 1]):
        v1, v2 = 2 * u1 - 1, 2 * u2 - 1
        w = v1 * v1 + v2 * v2
        if 0.0 < w <= 1.0:
            factor = math.sqrt(-2 * math.log(w) / w)
            normals.extend((v1 * factor, v2 * factor))
    return normals


def bivariate_normal_x(z1: Sequence[float]) -> list[float]:
    """X component of a standard bivariate normal."""
    mu_x, sigma_x = 0.0, 1.0
    return [mu_x + sigma_x * z for z in z1]


def bivariate_normal_y(z1: Sequence[float], z2: Sequence[float], rho: float) -> list[float]:
    """Y component of a standard bivariate normal with correlation rho."""
    mu_y, sigma_y = 0.0, 1.0
    spread = math.sqrt(1 - rho * rho)
    return [
        mu_y + sigma_y * rho * a + sigma_y * spread * b
        for a, b in zip(z1, z2, strict=True)
    ]


def wiener_process(t: float, size: int, seed: int) -> list[float]:
    """Increments of a Wiener process over time t: normals scaled by sqrt(t)."""
    even = size + size % 2
    normals = box_muller(runif(even, seed))[:size]
    return scale(normals, math.sqrt(t))


def halton_sequence(base: int, size: int) -> list[float]:
    """First size points of the van der Corput / Halton sequence in base."""
    if base < 2:
        raise ValueError("base must be at least 2")
    if size <= 0:
        return []
    num_digits = int(1 + math.ceil(math.log(size) / math.log(base)))
    weights = [base ** -(k + 1) for k in range(num_digits)]
    seq = []
    for i in range(1, size + 1):
        digits = []
        while i > 0:
            i, digit = divmod(i, base)
            digits.append(digit)
        seq.append(dot(digits, weights[:len(digits)]))
    return seq