[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashbench"
version = "0.1.0"
description = "Benchmark of open-addressing, chaining and two-choice hash tables with several integer hash functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hashing",
    "hash table",
    "benchmark",
    "linear probing",
    "quadratic probing",
    "robin hood",
    "separate chaining",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hashbench = "hashbench.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["hashbench"]

[tool.pytest.ini_options]
addopts = "-ra"
