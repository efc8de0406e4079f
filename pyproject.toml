[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "macnotify"
version = "0.1.0"
description = "Send spoken and dialog notifications on macOS from the command line or from Python"
requires-python = ">=3.10"
keywords = ["notification", "macos", "say", "osascript", "cli", "yaml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: MacOS X",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
notify = "macnotify.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["macnotify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
