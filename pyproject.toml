[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsadrills"
version = "0.1.0"
description = "Classic programming drills: text patterns, frequency counting, recursion and simple sorts"
requires-python = ">=3.10"
dependencies = []
keywords = ["patterns", "recursion", "sorting", "hashing", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsadrills-patterns = "dsadrills.patterns:main"
dsadrills-hashing = "dsadrills.hashing:main"
dsadrills-recursion = "dsadrills.recursion:main"
dsadrills-sorting = "dsadrills.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["dsadrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
