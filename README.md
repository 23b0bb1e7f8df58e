# compfin

Tools for pricing options and simulating the processes behind them.

## Modules

- `compfin.mathutils`: sample statistics (`mean`, `stdev`, `cov`, `corr`),
  a six-term polynomial approximation of the standard normal CDF (`pnorm`),
  list helpers (`scale`, `shift`, `dot`) and CSV writers (`write_array_csv`,
  `write_matrix_csv`; the latter writes the matrix transposed).
- `compfin.randoms`: a multiplicative congruential uniform generator
  (`lgm_next`, `runif`), binomial and exponential draws (`rbinom`, `rexp`),
  Box–Muller and Polar–Marsaglia normals (`box_muller`, `box_muller_halton`,
  `polar_marsaglia`), bivariate normals (`bivariate_normal_x`,
  `bivariate_normal_y`), Wiener process increments (`wiener_process`) and
  Halton sequences (`halton_sequence`).
- `compfin.loan`: amortising loan helpers (`apr`, `monthly_payment`,
  `loan_a`, `loan_b`).
- `compfin.pricing`: Black–Scholes prices (`call_black_scholes`,
  `put_black_scholes`), simulated and antithetic call estimates
  (`call_payoffs_simulated`, `call_antithetic`), binomial trees with four
  parametrisations `"a"`–`"d"` (`call_european_binomial`,
  `put_european_binomial`, `put_american_binomial`), trinomial trees in
  price (`"a"`) or log-price (`"b"`) form (`call_european_trinomial`),
  quasi-Monte Carlo with two Halton sequences (`call_european_lds`) and
  fixed-strike lookback options (`lookback_call`, `lookback_put`, which take
  an optional `random.Random`). An unknown tree method raises `ValueError`.
- `compfin.finite_difference`: explicit, implicit and Crank–Nicolson
  solvers for a European put on a log-price grid (`efd_euro_put`,
  `ifd_euro_put`, `cnfd_euro_put`, with coefficient helpers
  `efd_probabilities`, `ifd_probabilities`, `cnfd_probabilities`), and a
  generalised solver for American calls and puts on a price grid
  (`american_option_price`, taking a `Scheme` and an `OptionKind` or their
  string values). Volatility, strike, rate, time step and maturity are fixed
  module constants (`SIGMA`, `STRIKE`, `RATE`, `DT`, `MATURITY`).
- `compfin.default_option`: a jump-diffusion collateral model and a default
  option on an amortising loan (`q_function`, `loan_balance`,
  `collateral_path`, and `price_default_option`, which returns a
  `DefaultResult` with `price`, `default_probability` and `expected_tau`).
- `compfin.fd_report`: tables of finite-difference prices
  (`euro_put_table`, `american_table`).

## Installation

```
pip install .
```

## Example

```python
from compfin.pricing import call_black_scholes, call_european_binomial
from compfin.finite_difference import american_option_price, Scheme, OptionKind

print(call_black_scholes(0.05, 0.24, 0.5, 32.0, 30.0))
print(call_european_binomial("a", 32.0, 30.0, 0.05, 0.24, 0.5, 100))
print(american_option_price(10.0, 0.25, Scheme.CNFD, OptionKind.PUT))
```

## Command-line reports

Lookback call and put prices for ten volatilities, then the default-option
study (option value, default probability and expected default time for
maturities of 3 to 8 years over a grid of jump and default intensities):

```
compfin-default-option
compfin-default-option --seed 42
```

`--seed` fixes the generator for the lookback paths; without it those prices
change from run to run. The default-option tables are deterministic. The
study runs 1000 paths of 1000 steps for each of 108 table rows in pure
Python, so it takes a long time.

Finite-difference tables for European puts set against Black–Scholes, and
American call and put prices for grid spacings 0.25, 1 and 1.25:

```
compfin-fd-report
```

## Tests

```
pip install .[test]
pytest
```