"""Tables of finite-difference option prices."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from compfin.finite_difference import (
    MATURITY,
    RATE,
    SIGMA,
    STRIKE,
    OptionKind,
    Scheme,
    american_option_price,
    cnfd_euro_put,
    efd_euro_put,
    ifd_euro_put,
)
from compfin.pricing import put_black_scholes

PRICES = range(4, 17)

_AMERICAN_RUNS = (
    (Scheme.EFD, OptionKind.CALL),
    (Scheme.IFD, OptionKind.CALL),
    (Scheme.CNFD, OptionKind.CALL),
    (Scheme.EFD, OptionKind.PUT),
    (Scheme.IFD, OptionKind.PUT),
    (Scheme.CNFD, OptionKind.PUT),
)

_FACTOR_LABELS = (
    (1, "sigma * sqrt(dx)"),
    (3, "sigma * sqrt(3 * dx)"),
    (4, "sigma * sqrt(4 * dx)"),
)

# Each section names its title and the solver used for each grid factor in turn.
_EURO_SECTIONS = (
    ("Explicit Finite-Difference method", (efd_euro_put, ifd_euro_put, cnfd_euro_put)),
    ("Implicit Finite-Difference method", (ifd_euro_put, ifd_euro_put, ifd_euro_put)),
    ("Crank-Nicolson Finite Difference method", (cnfd_euro_put, cnfd_euro_put, cnfd_euro_put)),
)

_AMERICAN_SPACINGS = (0.25, 1.0, 1.25)
_HEADER = "Price, Pay off, BS"
_BANNER = "#" * 95


def euro_put_table(
    solver: Callable[[float, int], float], delta_factor: int
) -> list[tuple[float, float, float]]:
    """Rows of (price, finite-difference value, Black-Scholes value) for prices 4 to 16."""
    return [
        (
            float(price),
            solver(price, delta_factor),
            put_black_scholes(RATE, SIGMA, MATURITY, price, STRIKE),
        )
        for price in PRICES
    ]


def american_table(ds: float) -> list[tuple[float, Scheme, OptionKind, float]]:
    """Rows of (price, scheme, kind, value) for prices 4 to 16 and every scheme and kind."""
    return [
        (float(price), scheme, kind, american_option_price(price, ds, scheme, kind))
        for price in PRICES
        for scheme, kind in _AMERICAN_RUNS
    ]


def _g(value: float) -> str:
    return format(value, "g")


def _print_euro_section(title: str, solvers) -> None:
    print(f"{'#' * 40} Qn1 {'#' * 50}")
    for index, ((factor, label), solver) in enumerate(zip(_FACTOR_LABELS, solvers)):
        print(f"{title}: {label}" if index == 0 else label)
        print(_HEADER)
        for price, value, bs in euro_put_table(solver, factor):
            print(f"{_g(price)} {_g(value)} {_g(bs)}")
    print(_BANNER)


def main(argv: list[str] | None = None) -> int:
    """Print the European and American finite-difference tables."""
    parser = argparse.ArgumentParser(description="Finite-difference option price tables.")
    parser.parse_args(argv)

    for title, solvers in _EURO_SECTIONS:
        _print_euro_section(title, solvers)

    print(f"{'#' * 40} Qn2 {'#' * 50}")
    for ds in _AMERICAN_SPACINGS:
        print(f"ds = {_g(ds)}")
        for price, scheme, kind, value in american_table(ds):
            print(f"{_g(price)} {scheme.value} {kind.value} {_g(value)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())