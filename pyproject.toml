[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "ticketbooker"
version = "1.0.0"
description = "Terminal application for booking, checking in and refunding event tickets and managing event seating plans"
requires-python = ">=3.10"
dependencies = []
keywords = ["tickets", "booking", "events", "seating", "venue", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ticketbooker = "ticketbooker.cli:main"

[tool.setuptools.packages.find]
include = ["ticketbooker*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
