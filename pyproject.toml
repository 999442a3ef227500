[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "inodefs"
version = "1.0.0"
description = "An in-memory i-node file system simulator with an interactive menu and command scripts"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "inode", "simulator", "education", "blocks", "bitmap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
inodefs = "inodefs.menu:main"

[tool.setuptools.packages.find]
include = ["inodefs*"]

[tool.pytest.ini_options]
addopts = "-ra"
