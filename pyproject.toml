[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edgepaddle"
version = "0.1.0"
description = "A small arcade game: keep a speeding ball inside the window with a paddle on the edge of your choice."
requires-python = ">=3.10"
keywords = ["game", "arcade", "paddle", "ball", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
edgepaddle = "edgepaddle.app:main"

[tool.hatch.build.targets.wheel]
packages = ["edgepaddle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
