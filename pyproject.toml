[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "midictl"
version = "0.1.0"
description = "Configuration, input mapping and dependency wiring for a hardware MIDI controller"
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "controller", "encoder", "configuration", "dependency-injection"]
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
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["midictl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
