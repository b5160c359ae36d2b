[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcdcontrol"
version = "0.1.0"
description = "Driver for HD44780-compatible character LCDs over 4-bit, 8-bit and I2C buses"
requires-python = ">=3.10"
dependencies = []
keywords = ["hd44780", "lcd", "display", "i2c", "gpio", "character-lcd", "driver"]
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
    "Framework :: AsyncIO",
    "Topic :: System :: Hardware :: Hardware Drivers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["lcdcontrol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
