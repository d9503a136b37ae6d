[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "succinctkit"
version = "0.1.0"
description = "Space-efficient data structures: rank/select, packed storage, Dyck matching, segment stacks and Euler trail bookkeeping"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "succinct",
    "rank-select",
    "dyck-word",
    "bitvector",
    "euler-trail",
    "space-efficient",
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["succinctkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
