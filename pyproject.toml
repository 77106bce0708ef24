[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vagas"
version = "0.1.0"
description = "Console menu for a parking-space system with a CSV user registry and login"
requires-python = ">=3.10"
dependencies = []
keywords = ["parking", "authentication", "csv", "login"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vagas = "vagas.principal:main"

[tool.hatch.build.targets.wheel]
packages = ["vagas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
