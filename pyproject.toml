[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acmsim"
version = "0.1.0"
description = "Off-lattice simulation of the q-state active clock model of self-propelled particles"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["active matter", "clock model", "flocking", "monte carlo", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
acmsim = "acmsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["acmsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
