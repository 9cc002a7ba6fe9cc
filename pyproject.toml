[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Small, readable implementations of classic data-structure and algorithm exercises."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "linked-list",
    "heap",
    "backtracking",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.hatch.build.targets.sdist]
include = ["dsakit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
