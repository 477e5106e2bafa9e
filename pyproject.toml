[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ailabkit"
version = "0.1.0"
description = "Classic search, graph and expert-system exercises: BFS/DFS, A*, N-Queens, Dijkstra, Prim and small rule-based advisors"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "a-star", "n-queens", "dijkstra", "prim", "expert-system", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ailabkit-graph = "ailabkit.graph:main"
ailabkit-astar = "ailabkit.astar:main"
ailabkit-queens = "ailabkit.queens:main"
ailabkit-sort = "ailabkit.sorting:main"
ailabkit-weighted = "ailabkit.weighted:main"
ailabkit-appraisal = "ailabkit.appraisal:main"
ailabkit-library = "ailabkit.library:main"
ailabkit-society = "ailabkit.society:main"

[tool.hatch.build.targets.wheel]
packages = ["ailabkit"]

[tool.pytest.ini_options]
addopts = "-ra"
