[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "indexador"
version = "0.1.0"
description = "Word index for text files, held in an ordered list or a binary search tree, with an interactive word search"
requires-python = ">=3.10"
dependencies = []
keywords = ["index", "inverted-index", "search", "binary-tree", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
indexador = "indexador.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["indexador"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
