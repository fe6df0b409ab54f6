[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rlearn"
version = "0.4.0"
description = "Reinforcement learning building blocks: decay schedules, exploration policies, replay structures, tabular agents and policy iteration"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "reinforcement-learning",
    "rl",
    "machine-learning",
    "q-learning",
    "policy-iteration",
    "multi-armed-bandit",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rlearn-car-rental = "rlearn.policy_iteration:main"

[tool.hatch.build.targets.wheel]
packages = ["rlearn"]

[tool.hatch.build.targets.sdist]
include = ["rlearn", "tests", "README.md", "pyproject.toml"]

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
