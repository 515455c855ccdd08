[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minissl"
version = "1.0.0"
description = "Hand-written MD5, SHA-224, SHA-256, SHA-384 and SHA-512 digests with a command-line front end, plus small RSA arithmetic and DER key layout helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["md5", "sha224", "sha256", "sha384", "sha512", "hash", "digest", "rsa", "asn1", "der"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minissl = "minissl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minissl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
