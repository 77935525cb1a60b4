#!/usr/bin/python

import codecs
import os
import re

from setuptools import setup, find_packages


here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    with codecs.open(os.path.join(here, *parts), 'r') as f:
        return f.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


if __name__ == '__main__':
    setup(
        name="ldifget",
        version=find_version("ldifget", "__init__.py"),
        description="Extract attribute values from LDIF streams as rows, CSV or JSON",
        long_description=read("README.rst"),
        license="MIT",
        author="The ldifget developers",
        packages=find_packages(include=["ldifget", "ldifget.*"]),
        python_requires=">=3.7",
        install_requires=[
            "Twisted",
            "zope.interface",
        ],
        extras_require={
            "test": [
                "pytest",
            ],
        },
        entry_points={
            "console_scripts": [
                "ldifget = ldifget._scripts.ldifget:console_script",
                "ldapescape = ldifget._scripts.ldapescape:console_script",
            ],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Topic :: System :: Systems Administration :: Authentication/Directory :: LDAP",
        ],
    )
