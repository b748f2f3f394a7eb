[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparkmatch"
version = "0.1.0"
description = "Matching algorithms for pairing people: stable matching, maximum bipartite and general matching, and optimal assignment"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "matching",
    "gale-shapley",
    "hopcroft-karp",
    "hungarian",
    "blossom",
    "assignment",
    "stable-marriage",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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

[tool.hatch.build.targets.wheel]
packages = ["sparkmatch"]

[tool.pytest.ini_options]
addopts = "-ra"
