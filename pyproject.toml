[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plonkcore"
version = "0.1.0"
description = "Building blocks of a PLONK constraint system over the BLS12-381 scalar field: FFT domains, polynomials, gate constraints, a circuit builder and a compact circuit encoding."
requires-python = ">=3.10"
dependencies = [
    "msgpack",
]
keywords = ["plonk", "zero-knowledge", "bls12-381", "fft", "polynomial", "circuit", "poseidon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["plonkcore"]

[tool.pytest.ini_options]
addopts = "-ra"
