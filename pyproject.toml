[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chwire"
version = "0.1.0"
description = "Helpers for ClickHouse native-protocol clients: query settings, keyword matching, UUID and date conversion, TLS config registry."
requires-python = ">=3.10"
dependencies = []
keywords = ["clickhouse", "database", "native-protocol", "query-settings", "uuid", "varint"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
