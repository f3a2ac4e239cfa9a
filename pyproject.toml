[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floatstats"
version = "0.1.0"
description = "Descriptive statistics, regressions, distances and sampling for sequences of floats"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "statistics",
    "mean",
    "median",
    "mode",
    "variance",
    "standard deviation",
    "percentile",
    "quartile",
    "outliers",
    "regression",
    "correlation",
    "distance",
    "softmax",
    "entropy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
floatstats-demo = "floatstats.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["floatstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
