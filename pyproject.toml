[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csworks"
version = "0.1.0"
description = "Classic data-structure exercises: a stack, fixed-width big integers, an infix-to-assembly translator, a srcML profiling instrumenter and a sorting workbench"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "stack",
    "bigint",
    "postfix",
    "assembler",
    "srcml",
    "profiler",
    "sorting",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
csworks-postfix = "csworks.assembler:postfix_main"
csworks-assembler = "csworks.assembler:main"
csworks-profiler = "csworks.profiler:main"
csworks-sort = "csworks.sortapp:main"

[tool.hatch.build.targets.wheel]
packages = ["csworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
