[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures and algorithms: polynomials, stacks, queues, linked lists, trees, expression conversion, sparse matrices, sorting and CPU scheduling."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "polynomial",
    "stack",
    "queue",
    "linked-list",
    "binary-tree",
    "scheduling",
    "sparse-matrix",
    "expression-parsing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-polynomial = "structkit.polynomial:main"
structkit-bivariate = "structkit.bivariate:main"
structkit-expressions = "structkit.expressions:main"
structkit-scheduling = "structkit.scheduling:main"
structkit-gantt = "structkit.gantt:main"
structkit-timesharing = "structkit.timesharing:main"
structkit-customers = "structkit.customers:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

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
