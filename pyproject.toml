[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ariacrypt"
version = "0.1.0"
description = "ARIA block cipher and an interactive tool for encrypting and decrypting .txt block files"
requires-python = ">=3.10"
dependencies = []
keywords = ["aria", "block cipher", "cryptography", "encryption"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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
ariacrypt = "ariacrypt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ariacrypt"]

[tool.pytest.ini_options]
addopts = "-ra"
