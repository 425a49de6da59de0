[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netron"
version = "0.1.0"
description = "A small decentralized-chat web app: record ids, themes, chat state, HTML pages and a WSGI server"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "p2p", "web", "theme", "wsgi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netron-server = "netron.server:main"

[tool.hatch.build.targets.wheel]
packages = ["netron"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
