[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oracompat"
version = "0.1.0"
description = "Oracle-style PL/SQL package helpers: string utilities, business-day calendars, a pipe registry, output buffers, random values and unit assertions"
requires-python = ">=3.10"
dependencies = []
keywords = ["oracle", "plsql", "dbms_output", "dbms_random", "plvstr", "plvdate", "plunit", "compatibility"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oracompat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
