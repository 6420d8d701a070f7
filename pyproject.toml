[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dray"
version = "0.1.0"
description = "Encoding and decoding of SFTP version 3 protocol messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["sftp", "ssh", "protocol", "file transfer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: File Transfer Protocol (FTP)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
