#!/usr/bin/env python

from setuptools import find_packages, setup


with open("README.rst") as readme:
    long_description = str(readme.read())

setup(
    name="syntaxgen",
    version="2024.1",
    description="Derive complete syntax highlighting profiles "
                "from partial color schemes",
    long_description=long_description,
    author="Andreas Kloeckner",
    author_email="inform@tiker.net",
    python_requires=">=3.9",
    install_requires=[
        "coloraide>=2.0",
        "urwid>=2.4",
        "pygments>=2.7.4",
        "typing_extensions>=4.4",
    ],
    extras_require={
        "test": [
            "pytest>=2",
            "pytest-mock",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development",
        "Topic :: Text Editors",
        "Topic :: Utilities",
    ],
    packages=find_packages(exclude=["test", "test.*"]),
)
