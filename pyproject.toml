[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "ticketbooth"
version = "1.0.0"
description = "Interactive ticket booking for concerts and theatre plays with plain-text storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["booking", "tickets", "concerts", "theatre", "events"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ticketbooth = "ticketbooth.cli:main"

[tool.setuptools.packages.find]
include = ["ticketbooth*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
