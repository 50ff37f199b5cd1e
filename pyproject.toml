[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prattcalc"
version = "0.1.0"
description = "A small calculator built on Pratt parsing and a tree-walk interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "pratt", "parser", "interpreter", "repl", "s-expression"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
prattcalc = "prattcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prattcalc"]

[tool.pytest.ini_options]
addopts = "-ra"
