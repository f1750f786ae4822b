#!/usr/bin/env python

from setuptools import setup, find_packages

requires = []

extra_requires = {
    "test": ["pytest>=6.0"]
}

__version__ = None
__author__ = None
__email__ = None
exec(open("src/pycolorparse/version.py").read())

setup(
    name="pycolorparse",
    author=__author__,
    author_email=__email__,
    version=__version__,
    description="Parsers for hex, RGB and ANSI 256-color specifications",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=requires,
    extras_require=extra_requires,
)
