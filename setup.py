#!/usr/bin/env python
# -*- encoding: utf-8 -*-

"""Setup Module for gstester, the getter-setter convention verifier"""

import io
import re

from os.path import dirname, join

from setuptools import find_packages, setup


def read(*names, **kwargs):
    """Helper method to read files"""
    return io.open(
        join(dirname(__file__), *names),
        encoding=kwargs.get("encoding", "utf8"),
    ).read()


cli_requires = ["typer>=0.9.0", "rich>=13.0.0"]

install_requires = cli_requires + [
    "inflection>=0.5.1",
    "mock>=5.1.0",
    "pytest>=7.4.3",
    "typing-extensions>=4.10.0",
]

testing_requires = [
    "pytest-cov>=4.1.0",
]

types_requires = [
    "types-mock>=0.1.3",
]

dev_requires = (
    types_requires
    + testing_requires
    + [
        "black>=23.11.0",
        "check-manifest>=0.49",
        "coverage>=7.3.2",
        "nox>=2023.4.22",
        "pre-commit>=2.16.0",
        "tox>=4.11.3",
        "twine>=4.0.2",
    ]
)

setup(
    name="gstester",
    version="0.1.0",
    license="BSD 3-Clause License",
    description="Verify getter-setter mixins against their accessor convention",
    long_description="%s\n%s"
    % (
        re.compile("^.. start-badges.*^.. end-badges", re.M | re.S).sub(
            "", read("README.rst")
        ),
        re.sub(":[a-z]+:`~?(.*?)`", r"``\1``", read("CHANGELOG.rst")),
    ),
    long_description_content_type="text/x-rst",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.11",
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Framework :: Pytest",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords=["testing", "mixins", "getters", "setters", "pytest"],
    install_requires=install_requires,
    extras_require={
        "test": testing_requires,
        "tests": testing_requires,
        "testing": testing_requires,
        "dev": dev_requires,
        "all": dev_requires,
    },
    entry_points={
        "console_scripts": ["gstester = gstester.cli:app"],
        "pytest11": ["gstester = gstester.integrations.pytest.plugin"],
    },
)
