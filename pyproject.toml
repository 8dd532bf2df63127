[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelsprite"
version = "0.1.0"
description = "Pixel-art raster primitives, LZ-style binary compression and skyline rectangle packing"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["pixel-art", "raster", "drawing", "compression", "rectangle-packing", "sprite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest", "pillow"]

[project.scripts]
pixelsprite-compress = "pixelsprite.stbcompress:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelsprite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
