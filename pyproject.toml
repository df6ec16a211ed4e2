[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dxm"
version = "0.1.1"
description = "A manager for FXServer artifacts & resources."
requires-python = ">=3.11"
dependencies = [
    "requests",
    "tomli-w",
]
keywords = ["fivem", "redm", "fxserver", "cfx", "citizenfx"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["dxm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
