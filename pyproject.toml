[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabkit"
version = "0.1.0"
description = "Operating-systems lab exercises: file utilities, process demos, CPU scheduling, synchronisation and shared memory"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "fcfs",
    "round robin",
    "priority scheduling",
    "producer consumer",
    "readers writers",
    "shared memory",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
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
oslab-cat = "oslabkit.commands:cat_main"
oslab-grep = "oslabkit.commands:grep_main"
oslab-ls = "oslabkit.commands:ls_main"
oslab-rm = "oslabkit.commands:rm_main"
oslab-seek = "oslabkit.fileio:seek_main"
oslab-copy = "oslabkit.fileio:copy_main"
oslab-fcfs = "oslabkit.schedule:main"
oslab-priority = "oslabkit.priority:main"
oslab-round-robin = "oslabkit.round_robin:main"
oslab-sum-mul = "oslabkit.sum_mul:main"
oslab-producer-consumer = "oslabkit.bounded_buffer:main"
oslab-readers-writers = "oslabkit.readers_writers:main"
oslab-processes = "oslabkit.processes:main"
oslab-odd = "oslabkit.odd_numbers:main"
oslab-fibonacci = "oslabkit.fibonacci:main"
oslab-primes = "oslabkit.primes:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
