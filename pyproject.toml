[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursebook"
version = "0.1.0"
description = "mdbook preprocessor and renderer for course material, plus the course's worked exercises"
requires-python = ">=3.10"
keywords = ["mdbook", "markdown", "preprocessor", "frontmatter", "exercises", "course"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Education",
]
dependencies = [
    "markdown-it-py",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mdbook-course = "coursebook.course:main"
mdbook-exerciser = "coursebook.exerciser_cli:main"
coursebook-transpose = "coursebook.matrix:main"
coursebook-luhn = "coursebook.luhn:main"
coursebook-library = "coursebook.library:main"
coursebook-greeting = "coursebook.greetings:main"

[tool.hatch.build.targets.wheel]
packages = ["coursebook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
