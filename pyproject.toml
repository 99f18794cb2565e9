[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "homerun"
version = "0.1.0"
description = "Two-player road-crossing race: game server, network client and the world model behind them"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game", "arcade", "multiplayer", "race", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
homerun-server = "homerun.server:main"
homerun-client = "homerun.client:main"

[tool.hatch.build.targets.wheel]
packages = ["homerun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
