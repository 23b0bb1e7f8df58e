[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compfin"
version = "0.1.0"
description = "Option pricing, random number generation, finite-difference solvers and a loan default option model"
requires-python = ">=3.10"
keywords = [
    "finance",
    "options",
    "monte-carlo",
    "binomial-tree",
    "trinomial-tree",
    "finite-difference",
    "black-scholes",
    "halton",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
compfin-default-option = "compfin.default_option:main"
compfin-fd-report = "compfin.fd_report:main"

[tool.hatch.build.targets.wheel]
packages = ["compfin"]

[tool.pytest.ini_options]
addopts = "-ra"
