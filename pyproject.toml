[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "containerkit"
version = "0.1.0"
description = "Small container utilities: element lookup, bounded spans with span statistics, and an iterable stack."
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "stack", "span", "search"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
containerkit-easyfind = "containerkit.easyfind:main"
containerkit-span = "containerkit.span:main"
containerkit-mutant-stack = "containerkit.mutant_stack:main"

[tool.hatch.build.targets.wheel]
packages = ["containerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
