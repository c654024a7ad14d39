[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcnum"
version = "0.1.0"
description = "Classic numerical methods: secant root finding, Gaussian elimination, Jacobi and Gauss-Seidel iteration, and the Sassenfeld criterion"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "secant",
    "gaussian-elimination",
    "jacobi",
    "gauss-seidel",
    "sassenfeld",
    "linear-systems",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calcnum-secant = "calcnum.secant:main"
calcnum-gauss = "calcnum.gauss:main"
calcnum-jacobi = "calcnum.jacobi:main"
calcnum-seidel = "calcnum.seidel:main"
calcnum-sassenfeld = "calcnum.sassenfeld:main"
calcnum-demo = "calcnum.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["calcnum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
