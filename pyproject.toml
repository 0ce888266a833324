[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bignumcalc"
version = "0.1.0"
description = "Arbitrary-precision integer calculator working digit by digit"
requires-python = ">=3.10"
dependencies = []
keywords = ["arbitrary precision", "big integer", "calculator", "arithmetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
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
bignumcalc = "bignumcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bignumcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
