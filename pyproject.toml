[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "powervs_csi"
version = "0.1.0"
description = "Volume sizing, endpoint parsing, per-volume operation locks and version reporting for a block storage CSI driver"
requires-python = ">=3.10"
dependencies = []
keywords = ["csi", "kubernetes", "block-storage", "volumes", "powervs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["powervs_csi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
