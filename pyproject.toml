[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyats"
version = "0.1.0"
description = "Complex-number polynomials, Taylor series for sin(x) and sin(x)/x, and a small UDP telephone exchange"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "polynomial",
    "complex numbers",
    "taylor series",
    "sine",
    "udp",
    "telephone exchange",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Communications :: Telephony",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polyats-series = "polyats.calculator:main"
polyats-server = "polyats.server:main"
polyats-phone = "polyats.abonent:main"

[tool.hatch.build.targets.wheel]
packages = ["polyats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
