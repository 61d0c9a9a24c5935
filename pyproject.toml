[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stark_sdk"
version = "0.1.0"
description = "FRI parameters, verifier cost estimates, hash instrumentation and test AIRs for STARK proof systems"
requires-python = ">=3.10"
dependencies = []
keywords = ["stark", "fri", "zero-knowledge", "air", "proof-system"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stark_sdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
