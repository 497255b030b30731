[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gentoo-cruft"
version = "1.0.5"
description = "Find files that are not recorded in the Gentoo package database"
requires-python = ">=3.10"
keywords = ["cli", "filesystem", "gentoo", "linux", "cruft"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cruft = "gentoo_cruft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gentoo_cruft"]

[tool.pytest.ini_options]
addopts = "-ra"
