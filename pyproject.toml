[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "junkfield"
version = "0.1.0"
description = "A turn-based terminal game: collect space junk while dodging asteroids"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "asteroids", "arcade", "turn-based"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
junkfield = "junkfield.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["junkfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
