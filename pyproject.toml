[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typetrainer"
version = "0.1.0"
description = "A desktop touch-typing trainer with live speed and accuracy statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["typing", "touch typing", "keyboard", "trainer", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
typetrainer = "typetrainer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["typetrainer"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
