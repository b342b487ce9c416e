#!/usr/bin/env python
"""fputils setup module."""
import re
from pathlib import Path

from setuptools import find_namespace_packages, setup

LONG_DESCRIPTION = """
Small higher-order function utilities: composition, currying and memoization.
"""


def get_version(filename):
    text = Path(__file__).parent.joinpath(filename).read_text()
    match = re.search(r'^__version__ = "([^"]+)"', text, re.MULTILINE)
    if match is None:
        raise ValueError(f"No version found in {filename!r}.")
    return match.group(1)


install_requires = ["atpublic>=2.3", "koerce>=0.5", "toolz>=0.11"]
test_requires = ["hypothesis>=6.58", "pytest>=7"]

setup(
    name="fputils",
    packages=find_namespace_packages(include=["fputils", "fputils.*"]),
    version=get_version("fputils/__init__.py"),
    install_requires=install_requires,
    python_requires=">=3.10",
    extras_require={
        "test": test_requires,
    },
    description="Function composition, currying and memoization utilities",
    long_description=LONG_DESCRIPTION,
    license="Apache License, Version 2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
    ],
)
