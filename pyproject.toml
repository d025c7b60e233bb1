[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqmatrix"
version = "0.1.0"
description = "Small square integer matrices: addition, multiplication, diagonal sums, row and column swaps, and reading pairs from text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "square matrix", "linear algebra", "integer"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sqmatrix = "sqmatrix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sqmatrix"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
