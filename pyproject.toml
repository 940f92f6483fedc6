[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ironcat"
version = "0.1.0"
description = "A small 2D game engine core: events, layers, transforms, an orthographic camera and a pluggable render API"
requires-python = ">=3.10"
keywords = ["game engine", "2d", "rendering", "events", "layers", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ironcat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
