[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stackkit"
version = "0.1.0"
description = "Fixed-capacity stacks and queues, several stacks sharing one array, and classic stack algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "queue", "data-structures", "algorithms", "parentheses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stackkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
