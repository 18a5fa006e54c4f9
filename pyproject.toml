[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigkit"
version = "0.1.0"
description = "One-dimensional signal processing, statistics and special functions: biquad filtering, Savitzky-Golay, resampling, Bessel I0 and factorials."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "signal processing",
    "filter",
    "biquad",
    "second-order sections",
    "savitzky-golay",
    "resampling",
    "statistics",
    "bessel",
    "factorial",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sigkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
