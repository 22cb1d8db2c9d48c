[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vanityminer"
version = "0.1.0"
description = "Vanity address salt mining for CREATE2, CreateX CREATE3, Uniswap v4 hook and EulerSwap pool deployments."
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["ethereum", "vanity", "address", "salt", "create2", "create3", "createx", "uniswap", "eulerswap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vanityminer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
