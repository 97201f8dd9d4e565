[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mettle"
version = "0.1.0"
description = "Building blocks for a test framework: matchers, value printing, terminal formatting, indented output, test filters, loggers and command-line option parsing."
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "matchers", "test-runner", "logging", "filters"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mettle"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
