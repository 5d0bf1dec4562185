[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodesign"
version = "1.0.0"
description = "Classic algorithm-design exercises: divide and conquer, dynamic programming and greedy problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "quickselect",
    "dynamic-programming",
    "greedy",
    "divide-and-conquer",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
algodesign = "algodesign.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algodesign"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
