[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seaboy"
version = "0.1.0"
description = "Game Boy core pieces: SM83 registers, ALU and CB-prefixed instructions, timer and save-state serialization"
requires-python = ">=3.10"
dependencies = []
keywords = ["game boy", "emulator", "sm83", "dmg", "cgb", "save state", "timer"]
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
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["seaboy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
