[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zviewkit"
version = "0.9.0"
description = "Image viewer support toolkit: UTF-16 option files, image extension registry, message catalogues, size fitting and wallpaper settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "viewer", "thumbnail", "wallpaper", "options", "utf-16"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zviewkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
