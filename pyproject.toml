[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xvutils"
version = "0.1.0"
description = "Small Unix-style command-line tools plus models of a teaching kernel's memory layout, ELF and virtio structures"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unix",
    "coreutils",
    "grep",
    "shell",
    "parser",
    "elf",
    "virtio",
    "malloc",
    "prng",
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
    "Topic :: Utilities",
    "Topic :: Education",
    "Topic :: System :: Operating System Kernels",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv-grep = "xvutils.grep:main"
xv-cat = "xvutils.fileutils:cat_main"
xv-echo = "xvutils.fileutils:echo_main"
xv-ln = "xvutils.fileutils:ln_main"
xv-mkdir = "xvutils.fileutils:mkdir_main"
xv-rm = "xvutils.fileutils:rm_main"
xv-ls = "xvutils.ls:main"
xv-primes = "xvutils.primes:main"

[tool.hatch.build.targets.wheel]
packages = ["xvutils"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
