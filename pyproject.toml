[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loutil"
version = "0.1.0"
description = "Fixed-size tuples with zip, unzip and cross-join helpers, plus utilities for zero values, optional values and coalescing."
requires-python = ">=3.10"
dependencies = []
keywords = ["tuples", "zip", "unzip", "cross join", "cartesian product", "coalesce", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["loutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
