[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketccu"
version = "0.1.0"
description = "Camera state model, lens and video configuration helpers for camera control units"
requires-python = ">=3.10"
dependencies = []
keywords = ["camera", "ccu", "camera-control", "video", "lens", "codec", "timecode"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pocketccu"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
