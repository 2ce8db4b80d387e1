[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "translatron"
version = "1.0.0"
description = "Assemble a subset of MIPS instructions to machine code and disassemble it back"
requires-python = ">=3.10"
dependencies = []
keywords = ["mips", "assembler", "disassembler", "machine-code", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development :: Assemblers",
    "Topic :: Software Development :: Disassemblers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
translatron = "translatron.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["translatron"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
