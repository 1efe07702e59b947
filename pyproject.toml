[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algosolve"
version = "0.1.0"
description = "Solvers for classic algorithmic problems: sliding windows, LIS, KMP, grid searches and greedy matching"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "bfs", "kmp", "lis", "union-find", "greedy", "backtracking"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algosolve-sliding-min = "algosolve.sliding_min:main"
algosolve-lis = "algosolve.lis:main"
algosolve-door-maze = "algosolve.door_maze:main"
algosolve-hills = "algosolve.hills:main"
algosolve-paint-reach = "algosolve.paint_reach:main"
algosolve-kmp = "algosolve.kmp:main"
algosolve-bishops = "algosolve.bishops:main"
algosolve-swans = "algosolve.swans:main"
algosolve-grass = "algosolve.grass:main"

[tool.hatch.build.targets.wheel]
packages = ["algosolve"]

[tool.pytest.ini_options]
addopts = "-ra"
