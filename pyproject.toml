[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynsssp"
version = "0.1.0"
description = "Single-source shortest paths on undirected weighted graphs, kept up to date under batches of edge insertions and deletions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "shortest-path",
    "sssp",
    "dynamic-graph",
    "incremental",
    "partitioning",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dynsssp = "dynsssp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dynsssp"]

[tool.pytest.ini_options]
addopts = "-ra"
