[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libpower"
version = "0.1.0"
description = "Building blocks for power electronics control: compensators, PI/PID controllers, filters, MPPT, reference-frame transforms and test signals"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "power electronics",
    "control",
    "compensator",
    "pid",
    "filter",
    "butterworth",
    "chebyshev",
    "mppt",
    "clarke",
    "park",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libpower"]

[tool.pytest.ini_options]
addopts = "-ra"
