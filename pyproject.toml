[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of classic object-oriented design patterns: simple factory, strategy, decorator, proxy and factory method."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "factory",
    "strategy",
    "decorator",
    "proxy",
    "factory-method",
    "education",
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
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-calculator = "patternkit.calculator:main"
patternkit-cashier = "patternkit.cashier:main"
patternkit-factory-method = "patternkit.factory_method:main"
patternkit-decorator = "patternkit.decorator:main"
patternkit-proxy = "patternkit.proxy:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
