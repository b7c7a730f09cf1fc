[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eacripper"
version = "0.4.0"
description = "Cuesheet parsing, RIFF wave coding and stream utilities for splitting audio images into tracks"
requires-python = ">=3.10"
dependencies = []
keywords = ["cuesheet", "cue", "wave", "riff", "pcm", "audio", "uuid", "mersenne-twister"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eacripper-uuidgen = "eacripper.uuidgen:main"

[tool.hatch.build.targets.wheel]
packages = ["eacripper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
