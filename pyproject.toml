[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dvakit"
version = "0.1.0"
description = "Linked lists, binary search trees, sorting routines, a console Simon Says game and nrfx driver configuration helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "binary search tree", "sorting", "simon says", "nrfx", "data structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
dvakit-simon = "dvakit.simon:main"

[tool.hatch.build.targets.wheel]
packages = ["dvakit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
