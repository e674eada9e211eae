[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hotelmanager"
version = "0.1.0"
description = "Interactive hotel management: register guests, staff and rooms, and book stays."
requires-python = ">=3.10"
dependencies = []
keywords = ["hotel", "reservations", "rooms", "booking", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hotelmanager = "hotelmanager.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hotelmanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
