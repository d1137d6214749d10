[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvdasm"
version = "0.1.0"
description = "A small RISC-V RV32I disassembler, with a few companion command-line toys"
requires-python = ">=3.10"
dependencies = []
keywords = ["risc-v", "rv32i", "disassembler", "gcd", "wsgi", "ansi", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rvdasm = "rvdasm.listing:main"
rvdasm-gcd = "rvdasm.gcd:main"
rvdasm-gcd-server = "rvdasm.webapp:main"
rvdasm-guess = "rvdasm.guessing:main"
rvdasm-screen = "rvdasm.screen:main"

[tool.hatch.build.targets.wheel]
packages = ["rvdasm"]

[tool.hatch.build.targets.sdist]
include = ["rvdasm", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
