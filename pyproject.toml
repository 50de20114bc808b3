[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "opportunity-board"
version = "0.1.0"
description = "Keep a small board of educational opportunities, add new entries and search them from the terminal."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "opportunities", "internships", "workshops", "catalogue", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
opportunity-board = "opportunity_board.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["opportunity_board"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
