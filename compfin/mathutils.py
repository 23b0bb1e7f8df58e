"""Small numeric helpers: sample statistics, a normal CDF approximation and CSV output."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from os import PathLike

_PNORM_COEFFS = (
    0.0498673470,
    0.0211410061,
    0.0032776263,
    0.0000380036,
    0.0000488906,
    0.0000053830,
)


def _as_list(values: Iterable[float]) -> list[float]:
    data = list(values)
    if not data:
        raise ValueError("at least one value is required")
    return data


def _paired(x: Iterable[float], y: Iterable[float]) -> tuple[list[float], list[float]]:
    xs, ys = _as_list(x), _as_list(y)
    if len(xs) != len(ys):
        raise ValueError("sequences must have the same length")
    if len(xs) < 2:
        raise ValueError("at least two observations are required")
    return xs, ys


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean of the values."""
    data = _as_list(values)
    return sum(data) / len(data)


def stdev(values: Iterable[float]) -> float:
    """Sample standard deviation with Bessel's correction (none for a single value)."""
    data = _as_list(values)
    centre = mean(data)
    variance = sum((v - centre) ** 2 for v in data)
    n = len(data)
    variance /= n - (0 if n == 1 else 1)
    return math.sqrt(variance)


def cov(x: Iterable[float], y: Iterable[float]) -> float:
    """Sample covariance of two equally long sequences."""
    xs, ys = _paired(x, y)
    mx, my = mean(xs), mean(ys)
    return sum((a - mx) * (b - my) for a, b in zip(xs, ys)) / (len(xs) - 1)


def corr(x: Iterable[float], y: Iterable[float]) -> float:
    """Sample (Pearson) correlation of two equally long sequences."""
    xs, ys = _paired(x, y)
    mx, my = mean(xs), mean(ys)
    n1 = len(xs) - 1
    numerator = sum((a - mx) * (b - my) for a, b in zip(xs, ys)) / n1
    sx = math.sqrt(sum((a - mx) ** 2 for a in xs) / n1)
    sy = math.sqrt(sum((b - my) ** 2 for b in ys) / n1)
    return numerator / (sy * sx)


def _fmt(value: float) -> str:
    return format(value, "g")


def write_array_csv(values: Iterable[float], path: str | PathLike[str]) -> None:
    """Write one value per line, each followed by a comma."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(f"{_fmt(v)},\n" for v in values)


def write_matrix_csv(matrix: Sequence[Sequence[float]], path: str | PathLike[str]) -> None:
    """Write the matrix transposed: line i holds matrix[j][i] for every j."""
    with open(path, "w", encoding="utf-8") as fh:
        for column in zip(*matrix):
            fh.write("".join(f"{_fmt(v)}," for v in column) + "\n")


def scale(values: Iterable[float], factor: float) -> list[float]:
    """Return every value multiplied by factor."""
    return [v * factor for v in values]


def shift(values: Iterable[float], amount: float) -> list[float]:
    """Return every value increased by amount."""
    return [v + amount for v in values]


def pnorm(x: float) -> float:
    """Standard normal CDF by a six-term polynomial approximation."""
    ax = abs(x)
    temp = 1 + sum(c * ax ** (k + 1) for k, c in enumerate(_PNORM_COEFFS))
    probability = 1 - 0.5 * temp ** -16
    return probability if x >= 0 else 1 - probability


def dot(v1: Iterable[float], v2: Iterable[float]) -> float:
    """Sum of element-wise products; the sequences must be equally long."""
    return sum(a * b for a, b in zip(v1, v2, strict=True))