[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tubeutil"
version = "0.1.0"
description = "Helpers for video-site clients: byte and digit formatting, emoji shortcuts, rich-text runs and playback reporting URLs"
requires-python = ">=3.10"
dependencies = []
keywords = ["innertube", "emoji", "formatting", "playback", "html"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tubeutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
