[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixengine"
version = "0.1.0"
description = "Fixed-point math, simulated memory allocators, screen clipping and skeletal animation helpers for small game engines"
requires-python = ">=3.10"
dependencies = []
keywords = ["fixed-point", "game-engine", "quaternion", "allocator", "skeleton", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["fixengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
