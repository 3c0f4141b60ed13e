[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "musicplayer"
version = "0.1.0"
description = "In-memory music library of songs, playlists and artists, with console workflows for administrators and listeners"
requires-python = ">=3.10"
keywords = ["music", "playlist", "library", "artist", "catalogue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["musicplayer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
