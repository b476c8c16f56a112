[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pwlocalize"
version = "0.1.0"
description = "Merge translated game interface dialog XML and string tables into a localized output tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["localization", "translation", "xml", "stf", "utf-16", "game", "interface"]
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
    "Topic :: Software Development :: Localization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pwlocalize = "pwlocalize.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pwlocalize"]

[tool.pytest.ini_options]
addopts = "-ra"
