[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mygit"
version = "0.1.0"
description = "Building blocks of a small content-addressed version control system: objects, index, refs, config and line diffs"
requires-python = ">=3.10"
dependencies = []
keywords = ["version control", "vcs", "git", "content-addressed storage", "diff"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mygit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
