[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fhashkit"
version = "0.1.0"
description = "Pure-Python MD5, SHA-1, SHA-256 and SHA-512 file hashing with a progress-reporting hash engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "md5", "sha1", "sha256", "sha512", "checksum", "file-integrity", "pe-version"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fhashkit = "fhashkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fhashkit"]

[tool.hatch.build.targets.sdist]
include = ["fhashkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
