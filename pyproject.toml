[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pnmkit"
version = "0.1.0"
description = "Read, filter and write plain-text PGM (P2) and PPM (P3) images with 3x3 convolution filters."
requires-python = ">=3.10"
dependencies = []
keywords = ["pgm", "ppm", "netpbm", "image", "convolution", "blur", "sharpen", "laplace"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pnmkit-process = "pnmkit.processor:main"
pnmkit-threaded = "pnmkit.threaded:main"
pnmkit-multi = "pnmkit.multi_filter:main"
pnmkit-benchmark = "pnmkit.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["pnmkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
