[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textrecovery"
version = "1.0.0"
description = "Dictionary structures for restoring damaged text: a trie, a BK-tree with Damerau-Levenshtein distance, and word context counts"
requires-python = ">=3.10"
dependencies = []
keywords = ["trie", "bk-tree", "edit-distance", "damerau-levenshtein", "spelling", "text-recovery"]
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
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
prepare-data = "textrecovery.prepare_data:main"

[tool.hatch.build.targets.wheel]
packages = ["textrecovery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
