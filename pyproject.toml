[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kasir"
version = "1.0.0"
description = "A small point-of-sale REST API for product categories and products, served as a WSGI application over SQLite."
requires-python = ">=3.10"
keywords = ["kasir", "point-of-sale", "rest", "api", "wsgi", "sqlite", "products", "categories"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]
dependencies = [
    "werkzeug",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kasir = "kasir.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kasir"]

[tool.hatch.build.targets.sdist]
include = ["kasir", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
