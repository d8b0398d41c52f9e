[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shatool"
version = "0.1.0"
description = "SHA-2 message digests and HMACs in pure Python, with a small command-line tool"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sha2",
    "sha224",
    "sha256",
    "sha384",
    "sha512",
    "sha512-224",
    "sha512-256",
    "hmac",
    "digest",
    "hash",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shatool = "shatool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shatool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
