[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "authorcompany"
version = "1.0.0"
description = "Interactive console application form for would-be authors at a fictional book company"
requires-python = ">=3.10"
keywords = ["console", "interactive", "books", "simulation", "authors", "questionnaire"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
authorcompany = "authorcompany.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["authorcompany"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
