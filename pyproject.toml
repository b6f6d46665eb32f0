[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "expensepass"
version = "0.1.0"
description = "Solvers for two puzzles: expense report sums and password policy checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "advent", "expense-report", "password-policy"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["expensepass"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
