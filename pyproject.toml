[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "riverraid"
version = "0.1.0"
description = "A small River Raid style arcade game drawn with pygame: fly up the river past enemies and fuel tanks."
requires-python = ">=3.10"
keywords = ["game", "arcade", "river raid", "pygame", "shooter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
riverraid = "riverraid.game:main"

[tool.hatch.build.targets.wheel]
packages = ["riverraid"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
