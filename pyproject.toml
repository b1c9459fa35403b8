[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gestao-rh"
version = "1.0.0"
description = "Console human-resources system: employee records, sectors, job hierarchy and time clock"
requires-python = ">=3.10"
dependencies = []
keywords = ["rh", "recursos humanos", "funcionarios", "ponto", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gestao-rh = "gestao_rh.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gestao_rh"]

[tool.pytest.ini_options]
addopts = "-ra"
