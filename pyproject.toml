[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysprogkit"
version = "0.1.0"
description = "Small systems-programming teaching tools: an in-memory file tree, paths, a dynamic array, an ARMv8 instruction encoder, a string replacer and a survey."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "file tree",
    "dynamic array",
    "path",
    "armv8",
    "instruction encoding",
    "survey",
    "text replacement",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysprogkit-replace = "sysprogkit.replace:main"
sysprogkit-survey = "sysprogkit.survey:main"

[tool.hatch.build.targets.wheel]
packages = ["sysprogkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
