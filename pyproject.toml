[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphphysics"
version = "0.1.0"
description = "Interactive graph explorer with a spring layout, animated BFS/DFS and an island-counting grid view"
requires-python = ">=3.10"
keywords = ["graph", "bfs", "dfs", "spring-layout", "visualization", "islands", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Education",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
graphphysics = "graphphysics.app:main"

[tool.hatch.build.targets.wheel]
packages = ["graphphysics"]

[tool.pytest.ini_options]
addopts = "-ra"
