[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpgclasses"
version = "0.1.0"
description = "Role-playing character classes with level-based stat growth and class resources"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "role-playing", "character", "leveling", "game"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpgclasses = "rpgclasses.main:main"

[tool.hatch.build.targets.wheel]
packages = ["rpgclasses"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
