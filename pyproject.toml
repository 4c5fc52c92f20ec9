[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitrace"
version = "0.1.0"
description = "Building blocks for a small ray tracer: .rt scene parsing, ray-shape intersection, Phong shading, pixel images and XPM loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "phong", "scene", "xpm", "ppm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minitrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
