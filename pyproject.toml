[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtsptracks"
version = "0.1.0"
description = "RTSP track descriptions: build H264 tracks, resolve track URLs and clock rates, and write SDP"
requires-python = ">=3.10"
dependencies = []
keywords = ["rtsp", "sdp", "h264", "aac", "streaming", "rtp"]
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
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtsptracks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
