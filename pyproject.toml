[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vacinafila"
version = "0.1.0"
description = "Vaccination appointment queues per weekday slot, plus a small stack-based word reverser"
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "stack", "scheduling", "vaccination", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vacinafila = "vacinafila.scheduler:main"
vacinafila-reverse = "vacinafila.reverse:main"

[tool.hatch.build.targets.wheel]
packages = ["vacinafila"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
