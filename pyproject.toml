[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainlist"
version = "0.1.0"
description = "A singly linked list of integers with positional insertion, removal, search and sorting"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structures", "singly linked"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
chainlist-demo = "chainlist.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["chainlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
