[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coreext"
version = "1.5.4"
description = "Helpers for sequences and strings: UTF-8 byte-offset string functions, keyed splitting, position-aware slice views, indentation helpers and pipeline helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "slices", "utf-8", "utilities", "iterators", "indentation"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coreext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
