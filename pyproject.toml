[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptolab"
version = "0.1.0"
description = "Classic and textbook ciphers, stream generators and key-exchange protocols for study and experimentation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "vernam",
    "vigenere",
    "rc4",
    "a5",
    "e0",
    "aes",
    "cbc",
    "rsa",
    "elgamal",
    "elliptic-curve",
    "diffie-hellman",
    "fiat-shamir",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptolab = "cryptolab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptolab"]

[tool.hatch.build.targets.sdist]
include = ["cryptolab", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
