[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simpsons"
version = "0.1.0"
description = "Terminal dashboard widgets and views for exploring coding-assistant session history"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "tui", "dashboard", "heatmap", "sparkline", "bar-chart", "analytics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simpsons"]

[tool.hatch.build.targets.sdist]
include = ["simpsons", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
