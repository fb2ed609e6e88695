[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sblex"
version = "0.1.0"
description = "Morphology lookup for Swedish lexical resources: tries, a key-value store and small HTTP services"
requires-python = ">=3.10"
keywords = ["morphology", "lexicon", "saldo", "swedish", "trie", "linguistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Natural Language :: Swedish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Text Processing :: Linguistic",
]
dependencies = [
    "regex",
    "starlette",
    "uvicorn",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
    "httpx",
]

[project.scripts]
sblex-fm-server = "sblex.fm_cli:main"
sblex-morph-builder = "sblex.morph_builder:main"
sblex-server = "sblex.sblex_app:main"
sblex-load-morphology = "sblex.trie_morphology:main"

[tool.hatch.build.targets.wheel]
packages = ["sblex"]

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
