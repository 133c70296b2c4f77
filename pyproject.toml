[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherbox"
version = "0.1.0"
description = "Classical ciphers (Caesar, Affine, Atbash, ROT13, substitution, Polybius, autokey, columnar and rail fence) with a small JSON web service."
requires-python = ">=3.10"
keywords = [
    "cipher",
    "caesar",
    "affine",
    "atbash",
    "rot13",
    "polybius",
    "autokey",
    "rail fence",
    "columnar",
    "classical cryptography",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cipherbox-server = "cipherbox.server:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
