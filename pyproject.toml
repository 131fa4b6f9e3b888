[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "errorreboot"
version = "0.0.1"
description = "Error: Reboot"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "scene", "component", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
error-reboot = "errorreboot.app:main"

[tool.hatch.build.targets.wheel]
packages = ["errorreboot"]

[tool.pytest.ini_options]
addopts = "-ra"
