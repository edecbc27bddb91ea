[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "querychain"
version = "0.1.0"
description = "Lazy, re-iterable query chains over any iterable: filter, flatten, skip, take, union and zip."
requires-python = ">=3.10"
dependencies = []
keywords = ["query", "iterator", "lazy", "linq", "functional", "collections"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["querychain"]

[tool.pytest.ini_options]
addopts = "-ra"
