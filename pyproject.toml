[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ckmeans"
version = "1.1.0"
description = "Optimal one-dimensional k-means clustering by dynamic programming (Ckmeans)"
requires-python = ">=3.10"
dependencies = []
keywords = ["clustering", "ckmeans", "jenks", "natural-breaks", "k-means", "gis"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ckmeans"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
