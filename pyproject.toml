[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ppmtool"
version = "0.1.0"
description = "Command-line tool and library for inspecting, rescaling, resizing, colour-reducing and compressing binary PPM (P6) images"
requires-python = ">=3.10"
dependencies = []
keywords = ["ppm", "p6", "image", "resize", "color-reduction", "cppm", "compression"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
imtool-aos = "ppmtool.cli:main_aos"
imtool-soa = "ppmtool.cli:main_soa"

[tool.hatch.build.targets.wheel]
packages = ["ppmtool"]

[tool.hatch.build.targets.sdist]
include = ["ppmtool", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
