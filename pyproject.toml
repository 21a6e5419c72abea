[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "backtester"
version = "0.1.0"
description = "Event-driven tick backtester with a Bollinger-band mean-reversion strategy"
requires-python = ">=3.10"
dependencies = []
keywords = ["backtesting", "trading", "mean-reversion", "bollinger", "ticks", "finance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
backtester = "backtester.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["backtester"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
