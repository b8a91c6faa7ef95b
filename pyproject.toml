[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "layli"
version = "0.1.0"
description = "Diagram model, YAML configuration parsing and graph ranking for grid-laid-out box-and-arrow diagrams"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["diagram", "layout", "graph", "yaml", "tarjan", "topological-sort"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Presentation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["layli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
