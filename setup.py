##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

import os

from setuptools import find_packages, setup


version = __import__("structstash").VERSION

extras = ["dev"]


def readme():
    with open("README.md") as f:
        return f.read()


def reqs(filename: str):
    """
    Parse a file in the `requirements` directory. Comments and blank lines
    are skipped and `-r other.txt` lines pull in the requirements of the
    referenced file.

    Returns:
        List[str]: list of requirements specified in the file.
    """
    requirements = []
    with open(os.path.join(os.getcwd(), "requirements", filename)) as req_file:
        for line in req_file:
            req = line.split("#", 1)[0].strip()
            if not req:
                continue
            if req.startswith("-r "):
                requirements.extend(reqs(req.split()[1]))
            else:
                requirements.append(req)
    return requirements


def install_requires():
    """Get list of requirements required for installation."""
    return reqs("release.txt")


def extras_require():
    """Get map of all extra requirements."""
    return {x: reqs(x + ".txt") for x in extras}


setup(
    name="structstash",
    author="StructStash Dev team",
    version=version,
    description="Three ways to keep a nested record in Redis: flat hash, JSON in a hash, RedisJSON.",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    python_requires=">=3.9",
    keywords="redis json hash serialization",
    license="MIT",
    packages=find_packages(exclude=["tests.*", "tests"]),
    install_requires=install_requires(),
    extras_require=extras_require(),
    entry_points={
        "console_scripts": [
            "structstash=structstash.main:main",
        ]
    },
    include_package_data=True,
    zip_safe=False,
)
