[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jellofin"
version = "0.1.0"
description = "Framework-independent pieces of a Jellyfin-compatible media server: query handling, DTOs, sorting, paging, image resizing and HTTP helpers"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["jellyfin", "media server", "video", "streaming", "notflix", "hls"]
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
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["jellofin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
