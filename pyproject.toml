[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "composershell"
version = "1.0.0"
description = "A line-oriented project shell for Composer-based PHP projects, with a project explorer and package overviews"
requires-python = ">=3.10"
dependencies = []
keywords = ["composer", "php", "shell", "console", "packages", "project-explorer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
composershell = "composershell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["composershell"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
