[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "targa"
version = "0.5.0"
description = "Small, dependency-free TGA (Truevision Targa) image parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["tga", "targa", "image", "graphics", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["targa"]

[tool.pytest.ini_options]
addopts = "-ra"
