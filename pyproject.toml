[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hullstrength"
version = "0.1.0"
description = "Shear forces and bending moments of a ship hull in still water"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ship",
    "hull",
    "naval architecture",
    "shear force",
    "bending moment",
    "trim",
    "displacement",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hullstrength = "hullstrength.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hullstrength"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
