[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samtris"
version = "0.1.0"
description = "A small falling-block puzzle game with a testable core and a pygame front end"
requires-python = ">=3.10"
keywords = ["tetromino", "puzzle", "game", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
samtris = "samtris.main:main"

[tool.hatch.build.targets.wheel]
packages = ["samtris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
