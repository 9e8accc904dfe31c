[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ilmeeproject"
version = "1.0.0"
description = "Project, asset, scene and script management for a small game engine editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "editor", "assets", "project", "scenes", "file watcher"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ilmeeproject = "ilmeeproject.project:main"

[tool.hatch.build.targets.wheel]
packages = ["ilmeeproject"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
