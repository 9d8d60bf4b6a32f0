[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortlab"
version = "1.0.0"
description = "Interactive workbench that counts comparisons and swaps of classic sorting and searching algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "searching", "shellsort", "quicksort", "bubblesort", "algorithms", "statistics"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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
sortlab = "sortlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sortlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
