[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "cub3d"
version = "0.1.0"
description = "Parser and validator for .cub scene files, with XPM texture loading into in-memory images"
requires-python = ">=3.10"
dependencies = []
keywords = ["cub3d", "raycaster", "map", "xpm", "parser", "validator"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cub3d = "cub3d.cli:main"

[tool.setuptools.packages.find]
include = ["cub3d*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
