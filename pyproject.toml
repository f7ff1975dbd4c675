[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "petitsjeux"
version = "0.1.0"
description = "Small guessing games for the terminal and the browser: Le juste prix and Mastermind"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "mastermind", "guessing-game", "juste-prix", "terminal", "puzzle", "wsgi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
petitsjeux-juste-prix = "petitsjeux.juste_prix:main"
petitsjeux-mastermind = "petitsjeux.runner:main"
petitsjeux-mastermind-web = "petitsjeux.webapp:main"

[tool.hatch.build.targets.wheel]
packages = ["petitsjeux"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
