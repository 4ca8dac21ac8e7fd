[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quanlyvattu"
version = "0.1.0"
description = "Warehouse materials, employees and invoices with pipe-delimited file storage, plus small algorithm exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "inventory",
    "warehouse",
    "invoices",
    "avl-tree",
    "employees",
    "stock",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bounding-lines = "quanlyvattu.exercises.bounding_lines:main"
prime-sort = "quanlyvattu.exercises.prime_sort:main"
increasing-subsequences = "quanlyvattu.exercises.increasing_subsequences:main"
order-matching = "quanlyvattu.exercises.order_matching:main"
combinations = "quanlyvattu.exercises.combinations:main"

[tool.hatch.build.targets.wheel]
packages = ["quanlyvattu"]

[tool.hatch.build.targets.sdist]
include = ["quanlyvattu", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
