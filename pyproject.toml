[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.1.0"
description = "Data structures and algorithms for competitive programming: range queries, graphs, trees, strings, modular arithmetic and geometry."
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "competitive-programming",
    "algorithms",
    "data-structures",
    "segment-tree",
    "graph",
    "modular-arithmetic",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
