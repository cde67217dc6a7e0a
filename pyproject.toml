[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eatherapp"
version = "0.1.0"
description = "Terminal weather forecast client for the Open-Meteo API with a small local user store"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["weather", "forecast", "open-meteo", "cli", "terminal", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
eatherapp = "eatherapp.main:main"

[tool.hatch.build.targets.wheel]
packages = ["eatherapp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
