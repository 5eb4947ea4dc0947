[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocraft"
version = "0.1.0"
description = "Classic algorithms in plain Python: sorting, graphs, shortest paths, string matching, dynamic programming and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "sorting",
    "shortest-path",
    "string-matching",
    "dynamic-programming",
    "huffman",
    "backtracking",
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
algocraft-calc = "algocraft.smart_calc:main"

[tool.hatch.build.targets.wheel]
packages = ["algocraft"]

[tool.hatch.build.targets.sdist]
include = ["algocraft", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
