"""Option pricing, random number generation, finite-difference solvers and a loan default option model."""

__version__ = "0.1.0"