[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmprotate"
version = "0.1.0"
description = "Rotate 24-bit uncompressed BMP images by 90 degrees counterclockwise and compare BMP pixel data"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "bitmap", "image", "rotate", "rotation", "compare"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
image-transformer = "bmprotate.transformer:main"
image-matcher = "bmprotate.matcher:main"

[tool.hatch.build.targets.wheel]
packages = ["bmprotate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
