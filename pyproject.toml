[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashlabs"
version = "0.1.0"
description = "Small hashing utilities: duplicate-vote detection, a chained price table and image SHA-256 comparison"
requires-python = ">=3.10"
keywords = ["hashing", "hash table", "sha256", "duplicates", "image"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Topic :: Utilities",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hashlabs-voting = "hashlabs.voting:main"
hashlabs-pricetable = "hashlabs.pricetable:main"
hashlabs-image-digest = "hashlabs.image_digest:main"

[tool.hatch.build.targets.wheel]
packages = ["hashlabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
