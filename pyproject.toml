[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdtools"
version = "0.1.0"
description = "Personal diary tools backed by a plain-text .pdi file, with exact fractions and a growable vector"
requires-python = ">=3.10"
dependencies = []
keywords = ["diary", "journal", "personal", "fraction", "rational", "vector"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pdadd = "pdtools.cli:pdadd"
pdlist = "pdtools.cli:pdlist"
pdshow = "pdtools.cli:pdshow"
pdremove = "pdtools.cli:pdremove"
pdtools = "pdtools.cli:main"
fraction-demo = "pdtools.fraction_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["pdtools"]

[tool.hatch.build.targets.sdist]
include = ["pdtools", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
