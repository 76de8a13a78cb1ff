[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "djinni"
version = "0.1.0"
description = "A small 2D game engine on pygame: windows, renderers, textures, entities, simple geometry and levelled logging"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "2d", "sprite", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
djinni-demo = "djinni.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["djinni"]

[tool.pytest.ini_options]
addopts = "-ra"
