[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "centipede"
version = "0.1.0"
description = "A backtracking constraint satisfaction problem solver with arc consistency and domain propagation"
requires-python = ">=3.10"
dependencies = []
keywords = ["csp", "constraint satisfaction", "backtracking", "arc consistency", "ac-3", "solver"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["centipede"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
