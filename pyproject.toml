[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "armview"
version = "0.1.0"
description = "Six-axis articulated arm model: STL loading, link poses, view control and a serial joint-angle protocol"
requires-python = ">=3.10"
keywords = ["robot", "robotic arm", "stl", "kinematics", "serial", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "numpy",
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
armview = "armview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["armview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
