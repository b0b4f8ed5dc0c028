[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpdrills"
version = "0.1.0"
description = "Small, tested implementations of classic competitive-programming techniques"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "binary search",
    "backtracking",
    "subsets",
    "permutations",
    "kadane",
    "dynamic programming",
    "meet in the middle",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpdrills = "cpdrills.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
