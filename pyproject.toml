[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mysyslog"
version = "1.0.0"
description = "Small logging library that appends entries to a file as plain text or JSON lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "syslog", "json", "log-file", "drivers"]
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

[tool.hatch.build.targets.wheel]
packages = ["mysyslog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
