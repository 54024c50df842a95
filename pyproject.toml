[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fjira"
version = "0.1.0"
description = "Terminal user interface toolkit for a fuzzy-finding Jira client: screens, action bars, fuzzy finder, flash messages and navigation."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["jira", "tui", "terminal", "fuzzy-finder", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fjira"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
