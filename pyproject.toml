[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doclogger"
version = "0.1.0"
description = "A small thread-aware logger with coloured console output, log files and callbacks"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "ansi", "colour", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
doclogger-view = "doclogger.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["doclogger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
