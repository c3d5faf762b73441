[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bonobo"
version = "0.1.0"
description = "Building blocks for small real-time 3D rendering programs: logging, a log view, transforms, input state, an FPS camera, basis geometry and debug-message routing."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["graphics", "3d", "rendering", "camera", "transform", "input", "logging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bonobo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
