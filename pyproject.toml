[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "discovery-tree"
version = "0.1.0"
description = "Domain model for discovery trees: ordered task hierarchies with bottom-up completion and readiness rules."
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "tree", "planning", "discovery-tree", "work-items"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["discovery_tree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
