[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xiangqi-engine"
version = "0.1.0"
description = "Chinese chess (xiangqi) rules, move history and a minimax computer opponent"
requires-python = ">=3.10"
dependencies = []
keywords = ["xiangqi", "chinese chess", "board game", "minimax", "alpha-beta"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xiangqi_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
