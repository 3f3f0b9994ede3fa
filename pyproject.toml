[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossim"
version = "0.1.0"
description = "A teaching operating-system simulator with resource accounting, multilevel ready queues and small console applications"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating system",
    "simulator",
    "scheduling",
    "ready queue",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ossim = "ossim.desktop:main"
ossim-app = "ossim.apps:main"

[tool.hatch.build.targets.wheel]
packages = ["ossim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
