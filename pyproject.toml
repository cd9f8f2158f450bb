[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apishooter"
version = "0.1.0"
description = "An arcade shooter where HTTP methods are your weapons and status codes fire back"
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
api-shooter = "apishooter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["apishooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
