[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gw2dat"
version = "1.0.9"
description = "Binary structures, entry categorisation, hex dumps and channel toggling for Guild Wars 2 .dat archive contents"
requires-python = ">=3.10"
dependencies = []
keywords = ["gw2", "dat", "archive", "file-format", "hexdump", "texture"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gw2dat-hexdump = "gw2dat.hexview:main"

[tool.hatch.build.targets.wheel]
packages = ["gw2dat"]

[tool.pytest.ini_options]
addopts = "-ra"
