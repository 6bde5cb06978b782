[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solong"
version = "0.1.0"
description = "A small tile-based collect-and-escape puzzle game played on .ber map files"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tile map", "xpm", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
solong = "solong.app:main"

[tool.hatch.build.targets.wheel]
packages = ["solong"]

[tool.pytest.ini_options]
addopts = "-ra"
