[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ninjacore"
version = "1.9.0"
description = "Core helpers for a build system: path canonicalisation, shell escaping, metrics, hashing, version checks and a compiler wrapper"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "build",
    "build-system",
    "paths",
    "escaping",
    "metrics",
    "msvc",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ninjacore"]

[tool.pytest.ini_options]
addopts = "-ra"
