[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softsim"
version = "0.1.0"
description = "Interactive 2D soft-body physics simulation with mass points, springs and draggable polygon obstacles"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "soft body", "simulation", "springs", "mass-spring", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
softsim = "softsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["softsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
