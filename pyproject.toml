[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beetsp"
version = "0.1.0"
description = "Bees algorithm and nearest-neighbour heuristic for the asymmetric travelling salesman problem"
requires-python = ">=3.10"
dependencies = []
keywords = ["tsp", "atsp", "travelling salesman", "bees algorithm", "metaheuristic", "local search", "nearest neighbour"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
beetsp-greedy = "beetsp.greedy:main"
beetsp-bee = "beetsp.bee:main"
beetsp-verify = "beetsp.verify:main"

[tool.hatch.build.targets.wheel]
packages = ["beetsp"]

[tool.pytest.ini_options]
addopts = "-ra"
