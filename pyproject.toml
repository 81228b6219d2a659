[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cyanla"
version = "1.0.0"
description = "Visitor-side services for a company HR help desk: interview booking, FAQ, site navigation and chat rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["hr", "help-desk", "faq", "appointments", "chat", "navigation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cyanla"]

[tool.pytest.ini_options]
addopts = "-ra"
