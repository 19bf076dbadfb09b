[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pragemastik"
version = "0.1.0"
description = "Solvers, input checks, test-case generators and scorers for a set of competitive programming problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "problem-set",
    "scorer",
    "test-cases",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pragemastik = "pragemastik.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pragemastik"]

[tool.hatch.build.targets.sdist]
include = ["pragemastik", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
