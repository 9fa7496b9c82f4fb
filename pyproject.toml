[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thorview"
version = "1.0.0"
description = "Frame playback control, texture format mapping and image-quad transform maths for an image sequence viewer"
requires-python = ">=3.10"
dependencies = []
keywords = ["playback", "image sequence", "viewer", "transform", "opengl", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["thorview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
